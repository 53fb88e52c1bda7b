# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for the time calculator.

This module provides translation functions and language management.
Supports Chinese and English with automatic system locale detection.
"""

import locale
import logging
from typing import List

from timecalc.i18n.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

# Supported languages
SUPPORTED_LANGUAGES = ["zh", "en"]

# Current language (default to Chinese)
_current_language = "zh"


def detect_system_language() -> str:
    """
    Detect the system language and return a supported language code.

    Returns:
        'zh' if Chinese is detected, 'en' otherwise.
    """
    try:
        system_locale = locale.getlocale()[0]
    except ValueError:
        return 'en'
    if system_locale and system_locale.lower().startswith('zh'):
        return 'zh'
    return 'en'


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def set_language(lang: str) -> None:
    """
    Set the current output language.

    Args:
        lang: Language code ('zh', 'en' or 'auto')
    """
    global _current_language
    if lang == 'auto':
        lang = detect_system_language()
    if lang not in SUPPORTED_LANGUAGES:
        logger.warning(f"Unsupported language '{lang}', falling back to 'zh'")
        lang = 'zh'
    _current_language = lang


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for the given key.

    Args:
        key: Translation key (e.g., 'error.out_of_range')
        **kwargs: Format arguments for string interpolation

    Returns:
        Translated string, or the key itself if not found.
    """
    translations = TRANSLATIONS.get(_current_language, TRANSLATIONS['zh'])
    text = translations.get(key, key)

    # Apply format arguments if provided
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


def get_available_languages() -> List[tuple]:
    """
    Get list of available languages for UI display.

    Returns:
        List of (code, display_name) tuples.
    """
    return [
        ('zh', '中文'),
        ('en', 'English'),
    ]
