from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ai_rules.constants import COPILOT_INSTRUCTIONS_PATH
from ai_rules.merger import ContentMerger
from ai_rules.models import SyncPlan, SyncTarget
from ai_rules.source.models import RuleDocument, SourceTree
from ai_rules.targets.synchronizer import plan_overwrite


class MergedInstructionsTarget:
    """Single merged instructions file, always overwritten in full."""

    target = SyncTarget.COPILOT

    def __init__(
        self,
        merger: Optional[ContentMerger] = None,
        destination: str = COPILOT_INSTRUCTIONS_PATH,
    ) -> None:
        self.merger = merger or ContentMerger()
        self.destination = destination

    def plan(
        self,
        tree: SourceTree,
        local_documents: Iterable[RuleDocument],
        output_root: Path,
    ) -> SyncPlan:
        content = self.merger.merge(tree, local_documents)
        action = plan_overwrite(
            output_root / self.destination,
            content,
            "merge index, selected docs and local overrides",
            self.target.value,
        )
        return SyncPlan(actions=[action])
