"""Create new mode directories under a source root."""

from __future__ import annotations

import re
from pathlib import Path

from ai_rules.constants import (
    MODE_DESCRIPTOR_FILENAME,
    MODE_DIR_PREFIX,
    MODE_INSTRUCTIONS_FILENAME,
    MODES_DIRNAME,
)
from ai_rules.errors import ModeExistsError, SyncWriteError
from ai_rules.utils import write_json

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_WORD = re.compile(r"[A-Za-z0-9]+")


def dash_case(value: str) -> str:
    """``"My coolMode_v2"`` -> ``"my-cool-mode-v2"``."""
    spaced = _ACRONYM_WORD.sub(r"\1 \2", _LOWER_UPPER.sub(r"\1 \2", value))
    return "-".join(word.lower() for word in _WORD.findall(spaced))


def mode_dirname(slug: str) -> str:
    return f"{MODE_DIR_PREFIX}{dash_case(slug)}"


def mode_descriptor(slug: str, name: str) -> dict:
    return {
        "slug": slug,
        "name": name,
        "roleDefinition": f"You are Roo, working as {name}.",
        "groups": ["read"],
    }


def scaffold_mode(source_root: Path, slug: str, name: str) -> Path:
    """Write ``modes/rules-<slug>/`` with a descriptor and an instructions stub.

    The directory name doubles as the descriptor slug so the new mode
    aggregates without a slug warning. An existing directory is never touched.
    """
    dirname = mode_dirname(slug)
    mode_dir = source_root / MODES_DIRNAME / dirname
    if mode_dir.exists():
        raise ModeExistsError(mode_dir)
    try:
        mode_dir.mkdir(parents=True)
        write_json(mode_dir / MODE_DESCRIPTOR_FILENAME, mode_descriptor(dirname, name))
        (mode_dir / MODE_INSTRUCTIONS_FILENAME).write_text(
            f"# {name}\n\nInstructions for the {name} mode.\n", encoding="utf-8"
        )
    except OSError as exc:
        raise SyncWriteError(mode_dir, str(exc)) from exc
    return mode_dir
