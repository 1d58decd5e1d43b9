"""Environment-driven configuration.

Reads ``I18N_DIRECTORY_PATH``, ``I18N_LANGUAGES`` and the optional
``I18N_DEFAULT_LANGUAGE`` from the environment (or a ``.env`` file)::

    I18N_DIRECTORY_PATH=./translations
    I18N_LANGUAGES=en,fr
    I18N_DEFAULT_LANGUAGE=fr
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Dict, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translator settings - reads from environment variables"""

    directory_path: Optional[str] = None
    # left unchecked here, Translator.configure reports bad values as InvalidLanguages
    languages: Annotated[Optional[Any], NoDecode] = None
    default_language: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="I18N_",
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("languages", mode="before")
    @classmethod
    def parse_languages(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    return v
            return [x.strip() for x in v.split(",") if x.strip()]
        return v

    def as_config(self) -> Dict[str, Any]:
        """Return the raw mapping handed to ``Translator.configure``.

        Unset settings are left out so the usual ``MissingRequiredFields``
        error reports them.
        """
        raw: Dict[str, Any] = {}
        if self.directory_path is not None:
            raw["directory_path"] = self.directory_path
        if self.languages is not None:
            raw["languages"] = self.languages
        if self.default_language:
            raw["default_language"] = self.default_language
        return raw
