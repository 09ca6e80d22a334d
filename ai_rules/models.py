from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class ActionKind(str, Enum):
    WRITE_TEXT = "write_text"
    APPEND_TEXT = "append_text"
    WRITE_JSON = "write_json"
    COPY_FILE = "copy_file"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"
    APPEND = "append"


class ConflictPolicy(str, Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


class SyncTarget(str, Enum):
    ALL = "all"
    CURSOR = "cursor"
    ROO = "roo"
    CLINE = "cline"
    CLAUDE = "claude"
    COPILOT = "copilot"
    MODES = "modes"


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    source: Optional[Path] = None
    payload: Optional[Any] = None
    app: Optional[str] = None
    separator: str = "\n"


@dataclass
class SyncPlan:
    actions: list[Action] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["warnings"] = len(self.warnings)
        return counts

    def extend(self, other: "SyncPlan") -> None:
        self.actions.extend(other.actions)
        self.warnings.extend(other.warnings)

    def filter_for_target(self, target: str) -> "SyncPlan":
        normalized = target.lower()
        if normalized == SyncTarget.ALL.value:
            return self
        filtered = [action for action in self.actions if action.app == normalized]
        return SyncPlan(actions=filtered, warnings=list(self.warnings))
