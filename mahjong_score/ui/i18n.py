"""Internationalization support for score presentation.

Usage:
    from mahjong_score.ui.i18n import t, set_language, translate_yaku

    set_language("en")              # Switch to English
    t("score.points", points=8000)  # -> "8000 pts"
    translate_yaku("riichi")        # -> "Riichi"
"""

import importlib
from typing import Dict, Optional

LANGUAGES = ("zh", "ja", "en")
FALLBACK_LANGUAGE = "zh"


class I18n:
    """Singleton holding the active language and the loaded translation tables."""

    _lang: str = FALLBACK_LANGUAGE
    _tables: Dict[str, dict] = {}

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language; unknown codes raise ``ValueError``."""
        lang = lang.strip().lower()
        if lang not in LANGUAGES:
            raise ValueError(f"unsupported language {lang!r}, expected one of {LANGUAGES}")
        cls._lang = lang

    @classmethod
    def table(cls, lang: Optional[str] = None) -> dict:
        """Translation table of a language, imported on first use."""
        lang = lang or cls._lang
        if lang not in cls._tables:
            module = importlib.import_module(f"mahjong_score.ui.locales.{lang}")
            cls._tables[lang] = module.TRANSLATIONS
        return cls._tables[lang]

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments.

        Keys missing from the active table fall back to the Chinese table,
        then to the key itself.
        """
        text = cls.table().get(key)
        if text is None:
            text = cls.table(FALLBACK_LANGUAGE).get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    I18n.set_language(lang)


def get_language() -> str:
    return I18n.get_language()


def translate_yaku(key: str) -> str:
    """Translate a yaku by its stable key."""
    return I18n.get(f"yaku.{key}")


def translate_tier(tier_key: str, multiplier: int = 1) -> str:
    """Translate a score tier; stacked limit hands read as 'double limit hand' etc."""
    if tier_key == "hand_limit" and multiplier > 1:
        return I18n.get("tier.multiple_hand_limit", n=multiplier)
    return I18n.get(f"tier.{tier_key}")


def translate_fu(key: str) -> str:
    return I18n.get(f"fu.{key}")


def translate_wind(wind_name: str) -> str:
    """Translate a seat wind by its enum name (EAST, SOUTH, ...)."""
    return I18n.get(f"wind.{wind_name.lower()}")
