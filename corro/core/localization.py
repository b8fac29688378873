"""
Translation of rule messages.

Rule messages double as translation keys. A locale file `<locale>.json` under
the locale path maps a message to its translation, either literally or through
dot-notation nesting:

    {"is required": "es obligatorio", "format": {"email": "correo no valido"}}

Usage:
    from corro.core.localization import __, set_locale

    __('is required')                          # Translated, or the key itself
    __('expected format {0}', ['email'])       # Positional parameters
    __('greeting', {'name': 'Ana'})            # Named parameters
    set_locale('es')                           # Change locale for this context
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from corro import config

logger = logging.getLogger(__name__)

_translations: Dict[str, Dict[str, Any]] = {}
_locale_path: Optional[str] = None
_current_locale: ContextVar[Optional[str]] = ContextVar('corro_locale', default=None)


def _get_translation(data: Dict[str, Any], key: str) -> Optional[str]:
    """Literal key first, then dot-notation through nested dicts."""
    if isinstance(data.get(key), str):
        return data[key]

    current: Any = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current if isinstance(current, str) else None


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache translations for a locale. Idempotent."""
    if locale in _translations:
        return _translations[locale]

    locale_file = Path(_locale_path or config.LOCALE_PATH) / f"{locale}.json"
    translations: Dict[str, Any] = {}

    if locale_file.exists():
        try:
            with locale_file.open(encoding='utf-8') as f:
                translations = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load locale file {locale_file}: {e}")

    _translations[locale] = translations
    return translations


def __(key: str, parameters: Sequence[Any] | Mapping[str, Any] | None = None,
       default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Translate a message and substitute its parameters.

    A sequence of parameters fills positional placeholders (`{0}`), a mapping
    fills named ones (`{name}`). A template that cannot be formatted with the
    given parameters is returned unformatted.
    """
    current_locale = locale or get_locale()

    translation = _get_translation(_load_locale(current_locale), key)

    if translation is None and current_locale != config.LOCALE_FALLBACK:
        translation = _get_translation(_load_locale(config.LOCALE_FALLBACK), key)

    if translation is None:
        translation = default or key

    if parameters:
        try:
            if isinstance(parameters, Mapping):
                translation = translation.format(**parameters)
            else:
                translation = translation.format(*parameters)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError):
            logger.debug(f"Message template {translation!r} left unformatted")

    return str(translation)


def set_locale(locale: str) -> None:
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get() or config.LOCALE_DEFAULT


def clear_cache() -> None:
    _translations.clear()


def set_locale_path(path: Optional[str]) -> None:
    """Override the locale directory at runtime; None restores the configured path."""
    global _locale_path
    _locale_path = path
    clear_cache()


trans = __
