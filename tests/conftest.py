import sys
import json
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def write_text():
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_json():
    def _write(path: Path, payload) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def local_root(output_root: Path) -> Path:
    return output_root / "local-ai-rules"


@pytest.fixture
def populated_source(source_root: Path, write_text, write_json) -> Path:
    write_text(source_root / "index.md", "# Base rules\n")
    write_text(source_root / "general-style.md", "Keep it short.\n")
    write_text(source_root / "ai-docs" / "react.md", "React notes.\n")
    write_text(source_root / "ai-docs" / "vue.md", "Vue notes.\n")
    write_text(source_root / "personas" / "reviewer.md", "You review code.\n")
    write_text(source_root / "commands" / "git" / "commit.md", "Write a commit.\n")
    write_json(
        source_root / "modes" / "architect" / "index.json",
        {
            "slug": "architect",
            "name": "Architect",
            "roleDefinition": "You design systems.",
            "groups": ["read", ["edit", {"fileRegex": "\\.md$", "description": "Markdown"}]],
        },
    )
    write_text(source_root / "modes" / "architect" / "instructions.md", "Plan first.\n")
    return source_root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
