"""
citegen/config.py

Configuration, constants, and shared settings.
"""

import os
from datetime import date
from typing import Optional, Tuple

# =============================================================================
# API KEYS (from environment)
# =============================================================================

GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY', '')

# =============================================================================
# GEMINI SETTINGS
# =============================================================================

GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.0-flash-exp')
GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_HEADERS = {
    'User-Agent': 'CiteGen/1.0',
    'Content-Type': 'application/json',
}

# Prefix the AI collaborator puts in front of every citation prompt
CONVERTER_PROMPT_PREFIX = "Convert the following content as requested:\n\n"

# =============================================================================
# EXTRACTION LIMITS
# =============================================================================

MAX_SCAN_CHARS = 5000  # document text scanned by the extractors
AI_EXCERPT_CHARS = 3000  # document excerpt embedded in AI prompts

# =============================================================================
# PLACEHOLDERS
# =============================================================================

AUTHOR_PLACEHOLDER = "[Author]"
ORGANIZATION_PLACEHOLDER = "[Author/Organization]"
PAGE_TITLE_PLACEHOLDER = "[Page Title]"
TITLE_PLACEHOLDER = "[Title]"
WEBSITE_PLACEHOLDER = "[Website]"
NO_DATE = "n.d."
AUTO_GENERATED_AUTHORS = "Auto-generated"

# =============================================================================
# VIDEO PLATFORMS
# =============================================================================

VIDEO_HOSTS: Tuple[str, ...] = ('youtube', 'vimeo')
DEFAULT_VIDEO_PLATFORM = "YouTube"

# =============================================================================
# FLASK SETTINGS
# =============================================================================

SECRET_KEY = os.environ.get('SECRET_KEY', 'citegen-dev-key-change-in-production')
MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max upload size
PORT = int(os.environ.get('PORT', 5000))
DEBUG = os.environ.get('DEBUG', 'false').lower() == 'true'

# =============================================================================
# DATES
# =============================================================================

# Spelled out here so access dates do not depend on the process locale
MONTH_NAMES: Tuple[str, ...] = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)


def format_access_date(day: Optional[date] = None) -> str:
    """Format a date as 'Month D, YYYY' (e.g. 'March 5, 2024')."""
    day = day or date.today()
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def current_year(day: Optional[date] = None) -> str:
    """Current calendar year as a string."""
    return str((day or date.today()).year)
