"""Configuration model and lifecycle states for the translator."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .errors import (
    ConfigError,
    InvalidConfigType,
    InvalidDefaultLanguage,
    InvalidDirectoryPath,
    InvalidLanguages,
    MissingConfig,
    MissingRequiredFields,
)

PATH_KEYS = ("directoryPath", "directory_path", "path")
DEFAULT_LANGUAGE_KEYS = ("defaultLanguage", "default_language")

CONFIG_SHAPE = (
    'The config must be a mapping with "directoryPath", "languages" and '
    'optionally "defaultLanguage" keys.'
)


class State(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    READY = "ready"


def quoted(values) -> str:
    """Render ``["en", "fr"]`` as ``"en", "fr"`` for error messages."""
    return ", ".join(f'"{v}"' for v in values)


class I18nConfig(BaseModel):
    """Validated translator configuration.

    Keys are accepted in camelCase (``directoryPath``, ``defaultLanguage``),
    snake_case, or as the short ``path``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    directory_path: Path = Field(validation_alias=AliasChoices(*PATH_KEYS))
    languages: List[StrictStr]
    default_language: Optional[StrictStr] = Field(
        default=None, validation_alias=AliasChoices(*DEFAULT_LANGUAGE_KEYS)
    )

    @field_validator("directory_path", mode="before")
    @classmethod
    def _path_required(cls, value: Any) -> Any:
        if value is None or value == "":
            raise ValueError('The "path" to the translation files directory is required.')
        return value

    @field_validator("directory_path")
    @classmethod
    def _path_is_directory(cls, value: Path) -> Path:
        if not value.exists():
            raise ValueError(f'"{value}" does not exist.')
        if not value.is_dir():
            raise ValueError(f'"{value}" is not a directory.')
        return value

    @field_validator("languages", mode="before")
    @classmethod
    def _languages_shape(cls, value: Any) -> Any:
        if value is None:
            raise ValueError('The "languages" is required.')
        if not isinstance(value, (list, tuple)):
            raise ValueError('The "languages" must be a list.')
        if not value:
            raise ValueError(
                'The "languages" can not be empty. You must specify at least one language.'
            )
        return list(value)

    @field_validator("languages")
    @classmethod
    def _languages_not_blank(cls, value: List[str]) -> List[str]:
        if any(not lang for lang in value):
            raise ValueError('The "languages" can not contain an empty language code.')
        return value

    @field_validator("default_language")
    @classmethod
    def _default_is_known(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        languages = info.data.get("languages")
        # languages already failed on its own; that error is reported first
        if value is None or languages is None:
            return value
        if value not in languages:
            raise ValueError(
                'The "defaultLanguage" must take one of the following values : '
                f"{quoted(languages)}."
            )
        return value


_FIELD_ERRORS: Dict[str, Type[ConfigError]] = {
    **{key: InvalidDirectoryPath for key in PATH_KEYS},
    "languages": InvalidLanguages,
    **{key: InvalidDefaultLanguage for key in DEFAULT_LANGUAGE_KEYS},
}

# used when pydantic's own type check fails rather than one of our validators
_TYPE_MESSAGES: Dict[Type[ConfigError], str] = {
    InvalidDirectoryPath: 'The "path" to the translation files directory must be a string or a path.',
    InvalidLanguages: 'The "languages" must be a list of strings.',
    InvalidDefaultLanguage: 'The "defaultLanguage" must be a string.',
}


def _config_error(exc: ValidationError) -> ConfigError:
    """Translate the first pydantic error into the matching typed error."""
    err = exc.errors()[0]
    field = str(err["loc"][0]) if err["loc"] else ""
    cls = _FIELD_ERRORS.get(field, InvalidConfigType)
    if err["type"] == "value_error":
        return cls(str(err["ctx"]["error"]))
    return cls(_TYPE_MESSAGES.get(cls, f"Invalid config ! {CONFIG_SHAPE}"))


def parse_config(config: Any) -> I18nConfig:
    """Validate raw configuration input and return an :class:`I18nConfig`.

    Checks run in a fixed order and the first failure is raised: missing
    input, wrong type, missing keys, then the directory, the languages and
    the default language.
    """
    if isinstance(config, I18nConfig):
        # re-run validation, the directory may have gone away since
        config = config.model_dump()
    if config is None or (not isinstance(config, Mapping) and not config):
        raise MissingConfig(f"A configuration is required. {CONFIG_SHAPE}")
    if not isinstance(config, Mapping):
        raise InvalidConfigType(f"Invalid config ! {CONFIG_SHAPE}")

    missing = []
    if not any(key in config for key in PATH_KEYS):
        missing.append('"directoryPath"')
    if "languages" not in config:
        missing.append('"languages"')
    if missing:
        raise MissingRequiredFields(
            f"Invalid config ! Missing {' and '.join(missing)}. {CONFIG_SHAPE}"
        )

    try:
        return I18nConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise _config_error(exc) from exc


def merge_config(config: Any, overrides: Mapping[str, Any]) -> Any:
    """Lay keyword ``overrides`` over ``config``.

    An override replaces every alias of the same field, so ``path=...``
    wins over a ``directoryPath`` already in ``config``. Inputs that are not
    mappings come back untouched for :func:`parse_config` to reject.
    """
    if config is None:
        return dict(overrides)
    if isinstance(config, I18nConfig):
        config = config.model_dump()
    if not isinstance(config, Mapping):
        return config
    merged = dict(config)
    for aliases in (PATH_KEYS, DEFAULT_LANGUAGE_KEYS):
        if any(key in overrides for key in aliases):
            for key in aliases:
                merged.pop(key, None)
    merged.update(overrides)
    return merged
