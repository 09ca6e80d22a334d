from ai_rules.source.config import DocsSelection, load_docs_selection
from ai_rules.source.models import Origin, RuleDocument, SourceTree
from ai_rules.source.provider import ISourceProvider, LocalSourceProvider
from ai_rules.source.resolver import SourceTreeResolver, load_local_documents
from ai_rules.source.walker import walk_documents

__all__ = [
    "DocsSelection",
    "ISourceProvider",
    "LocalSourceProvider",
    "Origin",
    "RuleDocument",
    "SourceTree",
    "SourceTreeResolver",
    "load_docs_selection",
    "load_local_documents",
    "walk_documents",
]
