"""
citegen/formatters/__init__.py

Citation formatters package.
"""

from .base import (
    BaseFormatter,
    register_formatter,
    get_formatter,
    format_manual_citation,
)
from .apa import APAFormatter
from .mla import MLAFormatter
from .chicago import ChicagoFormatter
from .harvard import HarvardFormatter
from .ieee import IEEEFormatter

__all__ = [
    'BaseFormatter',
    'register_formatter',
    'get_formatter',
    'format_manual_citation',
    'APAFormatter',
    'MLAFormatter',
    'ChicagoFormatter',
    'HarvardFormatter',
    'IEEEFormatter',
]
