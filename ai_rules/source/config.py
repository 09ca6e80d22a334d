"""Optional-documents selection read from the output root."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ai_rules.constants import DOCS_CONFIG_FILENAME
from ai_rules.errors import InvalidConfigSchemaError, InvalidJsonFormatError, SyncFileError
from ai_rules.utils import read_json_safe

DOCS_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["docs"],
    "properties": {
        "docs": {"type": "array", "items": {"type": "string"}},
    },
}

_VALIDATOR = Draft202012Validator(DOCS_CONFIG_SCHEMA)


@dataclass(frozen=True)
class DocsSelection:
    """Which optional docs to include. ``names`` of None means all of them."""

    names: list[str] | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def include_all(self) -> bool:
        return self.names is None


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_docs_config(payload: Any, config_path: Path) -> list[str]:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(config_path, "must be a JSON object")
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(config_path, _schema_error_message(error))
    return list(payload["docs"])


def parse_docs_config(config_path: Path) -> list[str] | None:
    payload, error = read_json_safe(config_path)
    if error is not None:
        raise InvalidJsonFormatError(config_path, error)
    if payload is None:
        if config_path.exists():
            raise InvalidJsonFormatError(config_path, "empty file")
        return None
    return validate_docs_config(payload, config_path)


def load_docs_selection(output_root: Path) -> DocsSelection:
    config_path = output_root / DOCS_CONFIG_FILENAME
    try:
        names = parse_docs_config(config_path)
    except SyncFileError as exc:
        return DocsSelection(
            names=None, warnings=[f"{exc}; including all optional docs"]
        )
    return DocsSelection(names=names)
