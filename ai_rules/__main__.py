from pathlib import Path
from typing import Callable

import click
from rich.console import Console

from ai_rules.constants import DEFAULT_SOURCE_DIRNAME
from ai_rules.errors import SyncAppError
from ai_rules.executor import SyncExecutor
from ai_rules.models import SyncPlan, SyncTarget
from ai_rules.modes.scaffold import dash_case, scaffold_mode
from ai_rules.planner import SyncPlanner
from ai_rules.source.provider import LocalSourceProvider
from ai_rules.tui.renderers import SyncConsoleUI


TARGET_VALUES = [target.value for target in SyncTarget]


def _target_argument(default: str = SyncTarget.ALL.value) -> Callable:
    return click.argument(
        "target",
        required=False,
        type=click.Choice(TARGET_VALUES, case_sensitive=False),
        default=default,
    )


def _path_options(func: Callable) -> Callable:
    func = click.option(
        "--output",
        "-o",
        "output",
        type=click.Path(file_okay=False, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Output root receiving every tool layout.",
    )(func)
    func = click.option(
        "--source",
        "-s",
        "source",
        type=click.Path(file_okay=False, path_type=Path),
        default=Path(DEFAULT_SOURCE_DIRNAME),
        show_default=True,
        help="Resolved rules source root.",
    )(func)
    return func


def _normalize_target(value: str) -> SyncTarget:
    return SyncTarget(value.lower())


def _build_scoped_plan(source: Path, output: Path, target: str) -> tuple[SyncPlan, Path]:
    output_root = output.expanduser().resolve()
    try:
        plan_result = SyncPlanner(
            source=LocalSourceProvider(source), output_root=output_root
        ).build()
    except SyncAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    normalized_target = _normalize_target(target)
    return plan_result.filter_for_target(normalized_target.value), output_root


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Fan rule documents out to per-tool layouts."""


@cli.command(help="Build and print a dry-run plan.")
@_target_argument()
@_path_options
def plan(target: str, source: Path, output: Path) -> None:
    ui = SyncConsoleUI(Console())
    scoped_plan, output_root = _build_scoped_plan(source, output, target)
    ui.render_plan(scoped_plan, mode=f"plan:{target.lower()}", output_root=output_root)


@cli.command(help="Apply planned sync changes.")
@_target_argument()
@_path_options
def apply(target: str, source: Path, output: Path) -> None:
    ui = SyncConsoleUI(Console())
    scoped_plan, output_root = _build_scoped_plan(source, output, target)
    ui.render_plan(scoped_plan, mode=f"apply:{target.lower()}", output_root=output_root)

    try:
        applied, unchanged = SyncExecutor().execute(scoped_plan)
    except SyncAppError as exc:
        ui.render_failure(str(exc))
        raise click.ClickException(f"Apply aborted: {exc}")
    ui.render_apply_result(applied, unchanged)


@cli.command("new-mode", help="Scaffold a mode directory under the source root.")
@click.argument("slug")
@click.argument("name")
@click.option(
    "--source",
    "-s",
    "source",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path(DEFAULT_SOURCE_DIRNAME),
    show_default=True,
    help="Rules source root receiving the mode.",
)
def new_mode(slug: str, name: str, source: Path) -> None:
    if not dash_case(slug):
        raise click.BadParameter("slug is required", param_hint="SLUG")
    if not name.strip():
        raise click.BadParameter("name is required", param_hint="NAME")

    ui = SyncConsoleUI(Console())
    source_root = source.expanduser().resolve()
    try:
        mode_dir = scaffold_mode(source_root, slug, name)
    except SyncAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_scaffold(slug, name, mode_dir, source_root)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
