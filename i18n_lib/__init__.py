"""Load per-language JSON translation files and look messages up.

Typical use::

    from i18n_lib import Translator

    tr = Translator({"directoryPath": "translations", "languages": ["fr", "en"]})
    tr.load()
    tr.t("username")              # default language (first configured)
    tr.t("great", "en", name="Anonymous")

The module-level ``configure``/``load``/``t``/``set_default_language``
functions drive one shared translator for applications that only need one.
"""
import logging
from importlib import metadata

from .errors import (
    ConfigError,
    DefaultLanguageError,
    I18nError,
    InvalidConfigType,
    InvalidDefaultLanguage,
    InvalidDirectoryPath,
    InvalidInterpolationValues,
    InvalidLanguage,
    InvalidLanguages,
    InvalidType,
    MissingConfig,
    MissingRequiredFields,
    MissingValue,
    NotConfigured,
    NotLoaded,
    StateError,
    TranslationFileError,
    TranslationFileMissing,
    TranslationFileNotAFile,
    TranslationFileParseError,
)
from .interpolation import interpolate
from .models import I18nConfig, State
from .translator import (
    Translator,
    configure,
    get_translator,
    i18n,
    load,
    set_default_lang,
    set_default_language,
    set_up,
    t,
)

DISTRIBUTION = "i18n-lib"

try:
    __version__ = metadata.version(DISTRIBUTION)
except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
    __version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Translator",
    "I18nConfig",
    "State",
    "interpolate",
    "configure",
    "load",
    "t",
    "set_default_language",
    "get_translator",
    "set_up",
    "i18n",
    "set_default_lang",
    "I18nError",
    "ConfigError",
    "MissingConfig",
    "InvalidConfigType",
    "MissingRequiredFields",
    "InvalidDirectoryPath",
    "InvalidLanguages",
    "InvalidDefaultLanguage",
    "StateError",
    "NotConfigured",
    "NotLoaded",
    "TranslationFileError",
    "TranslationFileMissing",
    "TranslationFileNotAFile",
    "TranslationFileParseError",
    "InvalidInterpolationValues",
    "DefaultLanguageError",
    "MissingValue",
    "InvalidType",
    "InvalidLanguage",
]
