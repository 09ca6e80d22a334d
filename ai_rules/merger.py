"""Concatenation of rule documents into one instructions file."""

from __future__ import annotations

from collections.abc import Iterable

from ai_rules.constants import MERGE_SEPARATOR
from ai_rules.source.models import RuleDocument, SourceTree


def merge_order(tree: SourceTree, local_documents: Iterable[RuleDocument]) -> list[RuleDocument]:
    """Base index, then optional docs in configured order, then local overrides."""
    ordered: list[RuleDocument] = []
    if tree.base_index is not None:
        ordered.append(tree.base_index)
    ordered.extend(tree.optional_docs)
    ordered.extend(local_documents)
    return ordered


def merge_documents(documents: Iterable[RuleDocument], separator: str = MERGE_SEPARATOR) -> str:
    return separator.join(document.content for document in documents if not document.is_blank)


class ContentMerger:
    def __init__(self, separator: str = MERGE_SEPARATOR) -> None:
        self.separator = separator

    def merge(self, tree: SourceTree, local_documents: Iterable[RuleDocument]) -> str:
        return merge_documents(merge_order(tree, local_documents), self.separator)
