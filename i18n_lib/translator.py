"""Translator lifecycle: configure, load, then look messages up.

A :class:`Translator` moves through three states::

    UNCONFIGURED --configure()--> CONFIGURED --load()--> READY

Lookups and default-language changes need ``READY``. Each instance owns its
configuration and translation table; the module-level functions at the
bottom work on one shared default instance.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from .errors import (
    InvalidInterpolationValues,
    InvalidLanguage,
    InvalidType,
    MissingValue,
    NotConfigured,
    NotLoaded,
)
from .interpolation import interpolate
from .loader import Messages, TranslationTable, load_table
from .models import I18nConfig, State, merge_config, parse_config, quoted

if TYPE_CHECKING:
    from .settings import I18nSettings

logger = logging.getLogger(__name__)


class Translator:
    """Holds one configuration and the translations loaded for it."""

    def __init__(self, config: Any = None, **kwargs: Any) -> None:
        self._config: Optional[I18nConfig] = None
        self._default_language: Optional[str] = None
        self._table: TranslationTable = {}
        self._state = State.UNCONFIGURED
        if config is not None or kwargs:
            self.configure(config, **kwargs)

    @classmethod
    def from_settings(
        cls, settings: Optional["I18nSettings"] = None, load: bool = True
    ) -> "Translator":
        """Build a translator from ``I18N_*`` environment settings."""
        from .settings import I18nSettings

        if settings is None:
            settings = I18nSettings()
        translator = cls(settings.as_config())
        if load:
            translator.load()
        return translator

    # -- state --------------------------------------------------------------

    @property
    def state(self) -> State:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is State.READY

    @property
    def config(self) -> Optional[I18nConfig]:
        return self._config

    @property
    def languages(self) -> List[str]:
        return list(self._config.languages) if self._config else []

    @property
    def default_language(self) -> Optional[str]:
        return self._default_language

    def _require_ready(self, operation: str) -> None:
        if self._state is State.UNCONFIGURED:
            raise NotConfigured(
                'No config found ! Please call the "configure" function to set the '
                f'config before calling the "{operation}" function.'
            )
        if self._state is State.CONFIGURED:
            raise NotLoaded(
                "Translation files are not yet loaded. Please call the \"load\" "
                "function to load the translation files before calling the "
                f'"{operation}" function.'
            )

    # -- lifecycle ----------------------------------------------------------

    def configure(self, config: Any = None, **kwargs: Any) -> I18nConfig:
        """Validate and store ``config``; the translator becomes CONFIGURED.

        ``config`` is a mapping (or an :class:`I18nConfig`); keyword
        arguments are merged over it, or used on their own. Nothing is read
        from the translation directory yet. On failure the previous state is kept.
        """
        if kwargs:
            config = merge_config(config, kwargs)
        parsed = parse_config(config)
        self._config = parsed
        self._default_language = parsed.default_language
        self._table = {}
        self._state = State.CONFIGURED
        return parsed

    def load(self) -> None:
        """Read every configured language file; the translator becomes READY.

        The first missing or malformed file aborts the load and leaves the
        translator exactly as it was.
        """
        if self._config is None:
            raise NotConfigured(
                'No config found ! Please call the "configure" function to set the '
                'config before calling the "load" function.'
            )
        config = self._config
        table = load_table(config.directory_path, config.languages)

        default = self._default_language or config.languages[0]
        self._table = table
        self._default_language = default
        self._state = State.READY
        logger.info("Available languages: %s", ", ".join(table))
        logger.info("Default language: %s", default)
        logger.info("Language files successfully loaded.")

    # -- lookups ------------------------------------------------------------

    def effective_language(self, language: Optional[str] = None) -> str:
        """Return the language a lookup for ``language`` would use."""
        self._require_ready("effective_language")
        return self._effective_language(language)

    def _effective_language(self, language: Optional[str]) -> str:
        if language is not None and language in self._config.languages:
            return language
        if language is not None:
            logger.debug(
                "Unknown language %r, falling back to %r", language, self._default_language
            )
        return self._default_language

    def lookup(
        self,
        key: str,
        language: Optional[str] = None,
        values: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Translate ``key`` into ``language`` (or the default language).

        Unknown languages fall back to the default language and unknown keys
        are returned unchanged. ``values`` (and any keyword arguments) fill
        ``{{name}}`` placeholders in the message.
        """
        self._require_ready("lookup")
        lang = self._effective_language(language)
        template = self._table[lang].get(key)
        if template is None:
            logger.debug("No %r translation for key %r", lang, key)
            return key
        if not isinstance(template, str):
            template = str(template)
        if values is not None and not isinstance(values, Mapping):
            raise InvalidInterpolationValues(
                "The interpolation values must be a mapping (i.e a key-value pair), "
                f"got {type(values).__name__}."
            )
        if kwargs:
            values = {**(values or {}), **kwargs}
        if values:
            return interpolate(template, values)
        return template

    t = lookup
    __call__ = lookup

    def has_key(self, key: str, language: Optional[str] = None) -> bool:
        """Whether ``key`` has a translation in the effective language."""
        self._require_ready("has_key")
        return key in self._table[self._effective_language(language)]

    def translations(self, language: Optional[str] = None) -> Messages:
        """Return a copy of the messages for the effective language."""
        self._require_ready("translations")
        return dict(self._table[self._effective_language(language)])

    def set_default_language(self, language: Any) -> None:
        """Make ``language`` the one used when a lookup names none."""
        self._require_ready("set_default_language")
        if language is None or language == "":
            raise MissingValue("The value of the new default language is required.")
        if not isinstance(language, str):
            raise InvalidType("The value of the new default language must be a string.")
        if language not in self._config.languages:
            raise InvalidLanguage(
                "The new default language is invalid. The new default language must "
                f"take one of the following values : {quoted(self._config.languages)}."
            )
        self._default_language = language
        logger.info("Default language set to %s", language)

    def __repr__(self) -> str:
        return (
            f"<Translator state={self._state.value} languages={self.languages} "
            f"default={self._default_language!r}>"
        )


# -- module-level API -------------------------------------------------------

_translator = Translator()


def get_translator() -> Translator:
    """Return the shared translator behind the module-level functions."""
    return _translator


def configure(config: Any = None, **kwargs: Any) -> I18nConfig:
    return _translator.configure(config, **kwargs)


def load() -> None:
    _translator.load()


def t(
    key: str,
    language: Optional[str] = None,
    values: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> str:
    """Translate ``key`` with the shared translator."""
    return _translator.lookup(key, language, values, **kwargs)


def set_default_language(language: Any) -> None:
    _translator.set_default_language(language)


# short aliases
set_up = configure
i18n = t
set_default_lang = set_default_language

__all__: List[str] = [
    "Translator",
    "get_translator",
    "configure",
    "load",
    "t",
    "set_default_language",
    "set_up",
    "i18n",
    "set_default_lang",
]
