from pathlib import Path

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from ai_rules.models import SyncPlan
from ai_rules.tui.enums import PanelStyle
from ai_rules.tui.tables import ApplyTable, PlanTable
from ai_rules.utils import compact_path, compact_paths_in_text


def _panel(title: str, body: RenderableType, style: PanelStyle) -> Panel:
    return Panel(body, title=title, border_style=style.value, padding=(0, 1))


class SyncConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(self, plan: SyncPlan, mode: str, output_root: Path) -> None:
        self.console.print(
            _panel(
                "plan overview",
                PlanTable.summary_block(plan, mode=mode, output_root=output_root),
                PanelStyle.OVERVIEW,
            )
        )

        groups = PlanTable.split_actions(plan)
        for app, actions in groups.items():
            self.console.print(
                _panel(app, PlanTable.actions_table(actions, output_root), PanelStyle.TARGET)
            )
        if not groups:
            self.console.print(_panel("actions", "No actions required.", PanelStyle.EMPTY))

        if plan.warnings:
            warnings_text = "\n".join(
                [f"- {escape(compact_paths_in_text(item, output_root))}" for item in plan.warnings]
            )
            self.console.print(_panel("warnings", warnings_text, PanelStyle.WARNINGS))

    def render_apply_result(self, applied: int, unchanged: int) -> None:
        self.console.print(ApplyTable.stats_panel(applied=applied, unchanged=unchanged))

    def render_scaffold(self, slug: str, name: str, mode_dir: Path, source_root: Path) -> None:
        body = "\n".join(
            f"- {escape(compact_path(path, source_root))}" for path in sorted(mode_dir.iterdir())
        )
        self.console.print(_panel(f"mode {escape(slug)}: {escape(name)}", body, PanelStyle.APPLY))

    def render_failure(self, message: str) -> None:
        self.console.print(_panel("failure", escape(message), PanelStyle.FAILURE))
