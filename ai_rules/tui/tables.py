from pathlib import Path

from rich.panel import Panel
from rich.table import Column, Table

from ai_rules.models import Action, ActionStatus, SyncPlan
from ai_rules.tui.enums import ACTION_STATUS_STYLE, PanelStyle
from ai_rules.utils import compact_path


class PlanTable:
    @staticmethod
    def summary_block(plan: SyncPlan, mode: str, output_root: Path) -> Table:
        counts = plan.summary()
        chips = [
            f"{status.value}={counts[status.value]}"
            for status in ActionStatus
            if counts[status.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Output", str(output_root))
        table.add_row("Actions", str(counts["actions"]))
        table.add_row("Warnings", str(counts["warnings"]))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def split_actions(plan: SyncPlan) -> dict[str, list[Action]]:
        groups: dict[str, list[Action]] = {}
        for action in plan.actions:
            groups.setdefault(action.app or "other", []).append(action)
        return groups

    @staticmethod
    def actions_table(actions: list[Action], output_root: Path) -> Table:
        table = Table(
            Column(header="Type", width=12),
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis", max_width=58),
            Column(header="Reason", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            status_value = action.status.value
            status_style = ACTION_STATUS_STYLE.get(action.status, "white")
            status_text = f"[{status_style}]{status_value}[/{status_style}]"
            table.add_row(
                action.kind.value,
                status_text,
                compact_path(action.path, output_root),
                action.detail,
            )
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, unchanged: int) -> Panel:
        stats: dict[str, str] = {
            "applied": str(applied),
            "unchanged": str(unchanged),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(table, title="apply", border_style=PanelStyle.APPLY.value)
