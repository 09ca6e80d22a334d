"""Source document data models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path, PurePosixPath

from ai_rules.constants import INDEX_FILENAME


class Origin(str, Enum):
    BASE = "base"
    OPTIONAL_DOC = "optional-doc"
    LOCAL = "local"
    PERSONA = "persona"
    COMMAND = "command"


@dataclass(frozen=True)
class RuleDocument:
    """Snapshot of one rule file.

    ``path`` is relative to the directory the document was enumerated from:
    the source root for source documents, the local-override directory for
    local ones. Documents enumerated under a category directory keep that
    directory as their first path component (``ai-docs/react.md``).
    """

    path: PurePosixPath
    content: str
    origin: Origin

    @property
    def name(self) -> str:
        return self.path.stem

    @property
    def category_path(self) -> PurePosixPath:
        if self.origin in (Origin.BASE, Origin.LOCAL) or len(self.path.parts) < 2:
            return self.path
        return PurePosixPath(*self.path.parts[1:])

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


@dataclass(frozen=True)
class SourceTree:
    root: Path
    base: tuple[RuleDocument, ...] = ()
    optional_docs: tuple[RuleDocument, ...] = ()
    personas: tuple[RuleDocument, ...] = ()
    commands: tuple[RuleDocument, ...] = ()
    mode_dirs: tuple[Path, ...] = ()
    documents: tuple[RuleDocument, ...] = ()
    warnings: tuple[str, ...] = field(default=(), compare=False)

    @property
    def base_index(self) -> RuleDocument | None:
        for document in self.base:
            if document.path == PurePosixPath(INDEX_FILENAME):
                return document
        return None

    def select_docs(self, names: list[str]) -> tuple[SourceTree, list[str]]:
        """Restrict optional docs to ``names``, in that order.

        Returns the narrowed tree and a warning for every requested name that
        has no matching document. The traversal-ordered ``documents`` keep
        their order, minus the dropped optional docs.
        """
        by_name: dict[str, RuleDocument] = {}
        for document in self.optional_docs:
            by_name.setdefault(document.category_path.with_suffix("").as_posix(), document)

        selected: list[RuleDocument] = []
        warnings: list[str] = []
        for name in names:
            document = by_name.get(name)
            if document is None:
                warnings.append(f"Optional doc not found, skipped: {name}")
                continue
            if document not in selected:
                selected.append(document)

        keep = set(selected)
        documents = tuple(
            document
            for document in self.documents
            if document.origin != Origin.OPTIONAL_DOC or document in keep
        )
        narrowed = replace(self, optional_docs=tuple(selected), documents=documents)
        return narrowed, warnings
