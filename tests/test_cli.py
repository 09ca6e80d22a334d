"""Tests for the CLI commands."""

import json
from pathlib import Path

from ai_rules.__main__ import cli


def _args(command: str, source: Path, output: Path, *extra: str) -> list[str]:
    return [command, *extra, "--source", str(source), "--output", str(output)]


def test_plan_is_dry_run(populated_source: Path, output_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, _args("plan", populated_source, output_root))

    assert result.exit_code == 0
    assert "plan overview" in result.output
    assert not (output_root / ".cursor").exists()


def test_apply_writes_outputs(populated_source: Path, output_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, _args("apply", populated_source, output_root))

    assert result.exit_code == 0
    assert "applied" in result.output
    assert (output_root / ".github" / "copilot-instructions.md").exists()
    assert (output_root / ".roomodes").exists()


def test_apply_scoped_to_target(populated_source: Path, output_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, _args("apply", populated_source, output_root, "cline"))

    assert result.exit_code == 0
    assert (output_root / ".clinerules" / "index.md").exists()
    assert not (output_root / ".cursor").exists()
    assert not (output_root / ".roomodes").exists()


def test_plan_shows_warnings(tmp_path: Path, output_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, _args("plan", tmp_path / "missing", output_root))

    assert result.exit_code == 0
    assert "warnings" in result.output


def test_unknown_target_rejected(populated_source: Path, output_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, _args("plan", populated_source, output_root, "vim"))

    assert result.exit_code != 0


def test_apply_write_failure_exits_non_zero(
    populated_source: Path, tmp_path: Path, cli_runner
) -> None:
    output = tmp_path / "out"
    output.mkdir()
    (output / ".clinerules").write_text("not a directory", encoding="utf-8")

    result = cli_runner.invoke(cli, _args("apply", populated_source, output, "cline"))

    assert result.exit_code != 0
    assert "Apply aborted" in result.output


def test_new_mode_scaffolds_directory(source_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["new-mode", "my-cool-mode", "My Cool Mode", "--source", str(source_root)]
    )

    assert result.exit_code == 0
    mode_dir = source_root / "modes" / "rules-my-cool-mode"
    assert (mode_dir / "index.json").is_file()
    assert (mode_dir / "instructions.md").is_file()


def test_new_mode_refuses_existing_directory(source_root: Path, cli_runner) -> None:
    args = ["new-mode", "reviewer", "Reviewer", "--source", str(source_root)]
    cli_runner.invoke(cli, args)

    result = cli_runner.invoke(cli, args)

    assert result.exit_code != 0
    assert "already exists" in result.output


def test_new_mode_requires_slug_and_name(source_root: Path, cli_runner) -> None:
    blank_slug = cli_runner.invoke(cli, ["new-mode", "!!!", "Name", "--source", str(source_root)])
    blank_name = cli_runner.invoke(cli, ["new-mode", "slug", " ", "--source", str(source_root)])

    assert blank_slug.exit_code != 0
    assert blank_name.exit_code != 0
    assert not (source_root / "modes").exists()


def test_new_mode_then_apply_writes_manifest(
    source_root: Path, output_root: Path, cli_runner
) -> None:
    cli_runner.invoke(cli, ["new-mode", "helper", "Helper", "--source", str(source_root)])

    result = cli_runner.invoke(cli, _args("apply", source_root, output_root, "modes"))

    assert result.exit_code == 0
    manifest = json.loads((output_root / ".roomodes").read_text(encoding="utf-8"))
    assert [mode["slug"] for mode in manifest["customModes"]] == ["rules-helper"]
    assert (output_root / ".roo" / "rules" / "rules-helper" / "instructions.md").exists()
