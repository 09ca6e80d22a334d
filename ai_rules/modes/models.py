"""Mode definition models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ModeDefinition:
    """A descriptor as written, apart from its slug.

    ``fields`` keeps the descriptor's keys, order and values untouched.
    """

    slug: str
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.fields)
        payload["slug"] = self.slug
        return payload


@dataclass(frozen=True)
class InstructionFile:
    slug: str
    source_path: Path

    @property
    def name(self) -> str:
        return self.source_path.name


@dataclass
class ModeAggregation:
    modes: list[ModeDefinition] = field(default_factory=list)
    instruction_files: list[InstructionFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.modes and not self.instruction_files

    def manifest(self) -> dict[str, Any]:
        return {"customModes": [mode.to_dict() for mode in self.modes]}
