from pathlib import Path
from typing import Optional

from ai_rules.models import ActionStatus, SyncPlan
from ai_rules.modes.aggregator import ModeAggregator
from ai_rules.source.config import load_docs_selection
from ai_rules.source.models import RuleDocument, SourceTree
from ai_rules.source.provider import ISourceProvider
from ai_rules.source.resolver import SourceTreeResolver, load_local_documents
from ai_rules.targets.merged import MergedInstructionsTarget
from ai_rules.targets.registry import build_synchronizers
from ai_rules.targets.synchronizer import TargetSynchronizer


class SyncPlanner:
    def __init__(
        self,
        source: ISourceProvider,
        output_root: Path,
        synchronizers: Optional[list[TargetSynchronizer]] = None,
        aggregator: Optional[ModeAggregator] = None,
        merged: Optional[MergedInstructionsTarget] = None,
    ) -> None:
        self.source = source
        self.output_root = output_root
        self.synchronizers = (
            synchronizers if synchronizers is not None else build_synchronizers()
        )
        self.aggregator = aggregator or ModeAggregator()
        self.merged = merged or MergedInstructionsTarget()

        self.plan = SyncPlan()
        self._touched: set[Path] = set()

    def build(self) -> SyncPlan:
        tree = self._resolve_tree()
        local_documents = self._load_local_documents()

        for synchronizer in self.synchronizers:
            self._add(synchronizer.plan_base(tree, self.output_root))
            self._add(synchronizer.plan_local(local_documents, self.output_root))
        self._add(self.aggregator.plan(tree, self.output_root))
        self._add(self.merged.plan(tree, local_documents, self.output_root))
        return self.plan

    def _resolve_tree(self) -> SourceTree:
        tree = SourceTreeResolver(self.source.resolve()).resolve()
        self.plan.warnings.extend(tree.warnings)

        selection = load_docs_selection(self.output_root)
        self.plan.warnings.extend(selection.warnings)
        if selection.include_all:
            return tree
        tree, missing = tree.select_docs(selection.names or [])
        self.plan.warnings.extend(missing)
        return tree

    def _load_local_documents(self) -> list[RuleDocument]:
        documents, warnings = load_local_documents(self.output_root)
        self.plan.warnings.extend(warnings)
        return documents

    def _add(self, partial: SyncPlan) -> None:
        # A path written earlier in this plan no longer holds what is on disk now.
        for action in partial.actions:
            if action.path in self._touched and action.status == ActionStatus.NOOP:
                action.status = ActionStatus.UPDATE
            self._touched.add(action.path)
        self.plan.extend(partial)

