"""
citegen/gemini.py

Gemini text generator used by the AI citation path.

A thin wrapper over the Gemini REST API: one POST per prompt, no retries.
Every failure surfaces as GenerationError so callers can tell a failed
call apart from a citation.
"""

import logging
from typing import Optional

import requests

from .config import (
    CONVERTER_PROMPT_PREFIX, DEFAULT_HEADERS, DEFAULT_TIMEOUT,
    GEMINI_API_KEY, GEMINI_API_URL, GEMINI_MODEL,
)
from .exceptions import GenerationError

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """
    Callable text generator backed by Google's Gemini API.

    Usage:
        generate = GeminiGenerator(api_key="...")
        text = generate("Generate a citation in APA 7th Edition format ...")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
        prompt_prefix: str = CONVERTER_PROMPT_PREFIX,
    ):
        self.api_key = api_key or GEMINI_API_KEY
        self.model = model or GEMINI_MODEL
        self.timeout = timeout
        self.prompt_prefix = prompt_prefix
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Lazy-loaded requests session with default headers."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(DEFAULT_HEADERS)
        return self._session

    @property
    def is_available(self) -> bool:
        """Check if Gemini API is configured."""
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{GEMINI_API_URL}/{self.model}:generateContent"

    def __call__(self, prompt: str) -> str:
        return self.generate(prompt)

    def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the generated text.

        Raises:
            GenerationError: if the key is missing, the request fails, the
                API answers with a non-2xx status, or the payload has no text
        """
        if not self.is_available:
            raise GenerationError("GEMINI_API_KEY not configured")

        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": self.prompt_prefix + prompt}
                    ]
                }
            ],
        }

        logger.info("Generating with Gemini model: %s", self.model)
        try:
            response = self.session.post(
                self.endpoint,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Gemini request failed: %s", e)
            raise GenerationError(f"Gemini request failed: {e}") from e

        if not response.ok:
            logger.error("Gemini API error: %s", response.status_code)
            raise GenerationError(
                f"Gemini API error: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GenerationError(f"Malformed Gemini response: {e}") from e

        if not isinstance(text, str) or not text.strip():
            raise GenerationError("Gemini returned an empty response")
        return text
