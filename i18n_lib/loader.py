"""Read and parse the per-language translation files."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from pydantic import TypeAdapter, ValidationError

from .errors import (
    TranslationFileError,
    TranslationFileMissing,
    TranslationFileNotAFile,
    TranslationFileParseError,
)

logger = logging.getLogger(__name__)

Messages = Dict[str, Any]
TranslationTable = Dict[str, Messages]

_MESSAGES = TypeAdapter(Messages)


def translation_path(directory: Path, language: str) -> Path:
    """Return the file holding ``language``'s messages inside ``directory``."""
    return Path(directory) / f"{language}.json"


def resolve_files(directory: Path, languages: Iterable[str]) -> List[Tuple[str, Path]]:
    """Pair each language with its file, checking every file is present.

    Raises on the first language whose file is missing or is not a regular
    file, before anything is read.
    """
    files: List[Tuple[str, Path]] = []
    for lang in languages:
        path = translation_path(directory, lang)
        if not path.exists():
            raise TranslationFileMissing(f'The file "{path}" doesn\'t exist.', path, lang)
        if not path.is_file():
            raise TranslationFileNotAFile(
                f'The path "{path}" is not a valid file path.', path, lang
            )
        files.append((lang, path))
    return files


def read_messages(path: Path, language: str) -> Messages:
    """Parse one translation file into a ``key -> template`` mapping.

    Any JSON object is accepted; values are kept as they are and turned into
    strings at lookup time.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise TranslationFileParseError(
            f"An error happened when parsing the file {language}.json ({path}): {exc}",
            path,
            language,
        ) from exc
    except OSError as exc:
        raise TranslationFileError(
            f"The file {language}.json ({path}) could not be read: {exc}", path, language
        ) from exc
    try:
        return _MESSAGES.validate_python(data)
    except ValidationError as exc:
        raise TranslationFileParseError(
            f"The file {language}.json ({path}) must contain a JSON object.",
            path,
            language,
        ) from exc


def load_table(directory: Path, languages: Iterable[str]) -> TranslationTable:
    """Build a fresh translation table for ``languages``.

    A language listed more than once is only read the first time. Any
    failure propagates and no table is returned.
    """
    table: TranslationTable = {}
    for lang, path in resolve_files(directory, languages):
        if lang in table:
            continue
        table[lang] = read_messages(path, lang)
        logger.info("File %s.json loaded", lang)
    return table
