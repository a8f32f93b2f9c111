"""
i18n module: dict-based translation with fallback to Italian.
Covers API messages only; page copy lives in the frontend.
"""

from locales.it import IT_STRINGS
from locales.en import EN_STRINGS

_STRINGS = {"it": IT_STRINGS, "en": EN_STRINGS}


def t(key: str, lang: str = "it", **kwargs) -> str:
    """Get translated string. Falls back to IT if key missing."""
    strings = _STRINGS.get(lang, _STRINGS["it"])
    text = strings.get(key, _STRINGS["it"].get(key, key))
    return text.format(**kwargs) if kwargs else text
