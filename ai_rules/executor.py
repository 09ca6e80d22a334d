import shutil
from typing import Protocol

from ai_rules.errors import SyncWriteError
from ai_rules.models import Action, ActionKind, ActionStatus, SyncPlan
from ai_rules.utils import join_with_separator, read_text_if_exists, write_json


class ActionHandler(Protocol):
    def handle(self, action: Action) -> bool: ...


class WriteTextHandler:
    def handle(self, action: Action) -> bool:
        if action.status == ActionStatus.NOOP:
            return False
        if not isinstance(action.payload, str):
            raise SyncWriteError(action.path, "missing text payload")
        action.path.parent.mkdir(parents=True, exist_ok=True)
        action.path.write_text(action.payload, encoding="utf-8")
        return True


class AppendTextHandler:
    """Appends to whatever the destination holds when the action runs."""

    def handle(self, action: Action) -> bool:
        if not isinstance(action.payload, str):
            raise SyncWriteError(action.path, "missing text payload")
        try:
            existing = read_text_if_exists(action.path)
        except UnicodeDecodeError as exc:
            raise SyncWriteError(action.path, f"existing content is not UTF-8 ({exc.reason})") from exc
        if existing is None:
            content = action.payload
        else:
            content = join_with_separator(existing, action.payload, action.separator)
        action.path.parent.mkdir(parents=True, exist_ok=True)
        action.path.write_text(content, encoding="utf-8")
        return True


class WriteJsonHandler:
    def handle(self, action: Action) -> bool:
        if action.status == ActionStatus.NOOP:
            return False
        write_json(action.path, action.payload)
        return True


class CopyFileHandler:
    def handle(self, action: Action) -> bool:
        if action.status == ActionStatus.NOOP:
            return False
        if action.source is None:
            raise SyncWriteError(action.path, "missing source for copy")
        action.path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(action.source, action.path)
        return True


class SyncExecutor:
    """Applies plan actions strictly in order; the first failure aborts the run."""

    def __init__(self) -> None:
        self.handlers: dict[ActionKind, ActionHandler] = {
            ActionKind.WRITE_TEXT: WriteTextHandler(),
            ActionKind.APPEND_TEXT: AppendTextHandler(),
            ActionKind.WRITE_JSON: WriteJsonHandler(),
            ActionKind.COPY_FILE: CopyFileHandler(),
        }

    def execute(self, plan: SyncPlan) -> tuple[int, int]:
        applied = 0
        unchanged = 0
        for action in plan.actions:
            handler = self.handlers.get(action.kind)
            if handler is None:
                raise SyncWriteError(action.path, f"unknown action kind {action.kind.value}")
            try:
                changed = handler.handle(action)
            except OSError as exc:
                raise SyncWriteError(action.path, str(exc)) from exc
            if changed:
                applied += 1
            else:
                unchanged += 1
        return applied, unchanged

