"""Exceptions raised by the translator.

Every error derives from :class:`I18nError`. Each family also inherits from
the closest builtin so callers can catch ``ValueError``/``TypeError`` as they
would for any other bad argument.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class I18nError(Exception):
    """Base class for all translator errors."""


# -- configuration ---------------------------------------------------------

class ConfigError(I18nError, ValueError):
    """The configuration passed to ``configure`` was rejected."""


class MissingConfig(ConfigError):
    pass


class InvalidConfigType(ConfigError, TypeError):
    pass


class MissingRequiredFields(ConfigError):
    pass


class InvalidDirectoryPath(ConfigError):
    pass


class InvalidLanguages(ConfigError):
    pass


class InvalidDefaultLanguage(ConfigError):
    pass


# -- lifecycle -------------------------------------------------------------

class StateError(I18nError, RuntimeError):
    """An operation was called before the translator was ready for it."""


class NotConfigured(StateError):
    pass


class NotLoaded(StateError):
    pass


# -- translation files -----------------------------------------------------

class TranslationFileError(I18nError):
    """A translation file could not be used.

    ``path`` is the file that failed and ``language`` the language code it
    belongs to.
    """

    def __init__(self, message: str, path: Path, language: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.language = language


class TranslationFileMissing(TranslationFileError):
    pass


class TranslationFileNotAFile(TranslationFileError):
    pass


class TranslationFileParseError(TranslationFileError):
    pass


# -- lookups ---------------------------------------------------------------

class InvalidInterpolationValues(I18nError, TypeError):
    pass


class DefaultLanguageError(I18nError, ValueError):
    """The value given to ``set_default_language`` was rejected."""


class MissingValue(DefaultLanguageError):
    pass


class InvalidType(DefaultLanguageError, TypeError):
    pass


class InvalidLanguage(DefaultLanguageError):
    pass
