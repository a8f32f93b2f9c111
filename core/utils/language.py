"""
Centralized language detection for all handlers.

Default: Italian. Switches to English when the caller asks for it.
"""

from typing import Optional

from core.domain.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES


def _normalize(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = value.strip().lower()
    for lang in SUPPORTED_LANGUAGES:
        if value.startswith(lang):
            return lang
    return None


def detect_lang(
    query: Optional[str] = None,
    cookie: Optional[str] = None,
    accept_language: Optional[str] = None,
    default: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Detect request language.

    Priority: explicit ?lang= query, then the lang cookie, then the first
    supported entry of the Accept-Language header.

    Returns:
        Language code ("it" or "en").
    """
    for candidate in (query, cookie):
        lang = _normalize(candidate)
        if lang:
            return lang
    if accept_language:
        # "en-US,en;q=0.9,it;q=0.8" -> first supported tag wins
        for part in accept_language.split(","):
            lang = _normalize(part.split(";")[0])
            if lang:
                return lang
    return default


def localized(record, field: str, lang: str) -> str:
    """Pick <field>_<lang> from a model or dict, falling back to Italian."""
    def _get(name):
        if isinstance(record, dict):
            return record.get(name)
        return getattr(record, name, None)

    value = _get(f"{field}_{lang}")
    if not value and lang != DEFAULT_LANGUAGE:
        value = _get(f"{field}_{DEFAULT_LANGUAGE}")
    return value or ""
