from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ai_rules.constants import LOCAL_RULES_DIRNAME
from ai_rules.models import Action, ActionKind, ActionStatus, ConflictPolicy, SyncPlan, SyncTarget
from ai_rules.source.models import RuleDocument, SourceTree
from ai_rules.targets.models import TargetSpec
from ai_rules.utils import file_matches


def plan_overwrite(
    path: Path,
    content: str,
    detail: str,
    app: str,
    source: Optional[Path] = None,
) -> Action:
    if not path.is_file():
        status = ActionStatus.CREATE
    elif file_matches(path, content):
        status = ActionStatus.NOOP
    else:
        status = ActionStatus.UPDATE
    return Action(
        ActionKind.WRITE_TEXT,
        path,
        status,
        detail,
        source=source,
        payload=content,
        app=app,
    )


class TargetSynchronizer:
    """Plans writes of rule documents into one tool's layout.

    Base documents always overwrite their destination. Local overrides follow
    ``TargetSpec.local_policy``: overwrite, or append at execution time after
    whatever the destination holds by then.
    """

    def __init__(self, spec: TargetSpec) -> None:
        self.spec = spec

    @property
    def target(self) -> SyncTarget:
        return self.spec.target

    def plan_base(self, tree: SourceTree, output_root: Path) -> SyncPlan:
        actions = [
            self._overwrite(document, output_root, tree.root, "sync rule")
            for document in tree.documents
        ]
        return SyncPlan(actions=actions)

    def plan_local(self, documents: Iterable[RuleDocument], output_root: Path) -> SyncPlan:
        local_root = output_root / LOCAL_RULES_DIRNAME
        actions: list[Action] = []
        for document in documents:
            if self.spec.local_policy == ConflictPolicy.OVERWRITE:
                actions.append(
                    self._overwrite(document, output_root, local_root, "sync local override")
                )
                continue
            actions.append(
                Action(
                    ActionKind.APPEND_TEXT,
                    self.spec.destination_for(document, output_root),
                    ActionStatus.APPEND,
                    "append local override",
                    source=local_root / Path(*document.path.parts),
                    payload=self.spec.render(document),
                    app=self.target.value,
                    separator=self.spec.separator,
                )
            )
        return SyncPlan(actions=actions)

    def _overwrite(
        self,
        document: RuleDocument,
        output_root: Path,
        source_root: Path,
        detail: str,
    ) -> Action:
        return plan_overwrite(
            self.spec.destination_for(document, output_root),
            self.spec.render(document),
            detail,
            self.target.value,
            source=source_root / Path(*document.path.parts),
        )
