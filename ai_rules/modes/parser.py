"""Parse mode descriptors (``index.json``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ai_rules.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from ai_rules.modes.models import ModeDefinition
from ai_rules.utils import read_json_safe

# Presence only: field contents are passed through untouched.
DESCRIPTOR_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "roleDefinition", "groups"],
}

_VALIDATOR = Draft202012Validator(DESCRIPTOR_SCHEMA)


def load_descriptor(path: Path) -> dict[str, Any]:
    payload, error = read_json_safe(path)
    if error is not None:
        raise InvalidJsonFormatError(path, error)
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(path, "must be a JSON object")
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, str(error.message))
    return payload


def parse_mode(payload: dict[str, Any], slug: str) -> ModeDefinition:
    """Build a definition whose slug is always ``slug``."""
    return ModeDefinition(slug=slug, fields=dict(payload))
