"""Tests for new mode scaffolding."""

import json
from pathlib import Path

import pytest

from ai_rules.errors import ModeExistsError
from ai_rules.modes.aggregator import ModeAggregator
from ai_rules.modes.parser import load_descriptor
from ai_rules.modes.scaffold import dash_case, mode_dirname, scaffold_mode


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("my-cool-mode", "my-cool-mode"),
        ("My Cool Mode", "my-cool-mode"),
        ("myCoolMode", "my-cool-mode"),
        ("HTMLWriter", "html-writer"),
        ("docs_writer v2", "docs-writer-v2"),
        ("--", ""),
    ],
)
def test_dash_case(value: str, expected: str) -> None:
    assert dash_case(value) == expected


def test_scaffold_writes_descriptor_and_instructions(source_root: Path) -> None:
    mode_dir = scaffold_mode(source_root, "Docs Writer", "Docs Writer")

    assert mode_dir == source_root / "modes" / "rules-docs-writer"
    descriptor = json.loads((mode_dir / "index.json").read_text(encoding="utf-8"))
    assert descriptor["slug"] == "rules-docs-writer"
    assert descriptor["name"] == "Docs Writer"
    assert (mode_dir / "instructions.md").read_text(encoding="utf-8").startswith("# Docs Writer\n")
    load_descriptor(mode_dir / "index.json")


def test_scaffolded_mode_aggregates_cleanly(source_root: Path) -> None:
    mode_dir = scaffold_mode(source_root, "reviewer", "Reviewer")

    result = ModeAggregator().aggregate([mode_dir])

    assert result.warnings == []
    assert [mode.slug for mode in result.modes] == [mode_dirname("reviewer")]
    assert [item.name for item in result.instruction_files] == ["instructions.md"]


def test_scaffold_refuses_existing_directory(source_root: Path, write_text) -> None:
    existing = write_text(source_root / "modes" / "rules-reviewer" / "instructions.md", "Mine.\n")

    with pytest.raises(ModeExistsError):
        scaffold_mode(source_root, "reviewer", "Reviewer")

    assert existing.read_text(encoding="utf-8") == "Mine.\n"
    assert not (existing.parent / "index.json").exists()
