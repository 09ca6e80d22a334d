"""Target adapter descriptors."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ai_rules.models import ConflictPolicy, SyncTarget
from ai_rules.source.models import Origin, RuleDocument

ContentWrapper = Callable[[RuleDocument], str]


@dataclass(frozen=True)
class TargetSpec:
    """Layout and conflict policy of one destination tool.

    ``routes`` sends documents of the given origins to their own directory,
    mirrored relative to their category directory instead of the source root.
    """

    target: SyncTarget
    rules_dir: str
    local_policy: ConflictPolicy
    local_dir: Optional[str] = None
    suffix: Optional[str] = None
    wrap: Optional[ContentWrapper] = None
    wrap_local: Optional[ContentWrapper] = None
    separator: str = "\n"
    routes: Mapping[Origin, str] = field(default_factory=dict)

    def destination_for(self, document: RuleDocument, output_root: Path) -> Path:
        if document.origin == Origin.LOCAL:
            base_dir = self.local_dir or self.rules_dir
            relative = document.path
        elif document.origin in self.routes:
            base_dir = self.routes[document.origin]
            relative = document.category_path
        else:
            base_dir = self.rules_dir
            relative = document.path
        if self.suffix:
            relative = relative.with_suffix(self.suffix)
        return output_root / base_dir / Path(*relative.parts)

    def render(self, document: RuleDocument) -> str:
        wrap = self.wrap_local if document.origin == Origin.LOCAL else self.wrap
        if wrap is None:
            return document.content
        return wrap(document)
