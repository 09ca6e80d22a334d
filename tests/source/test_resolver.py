"""Tests for SourceTreeResolver and local override loading."""

from pathlib import Path, PurePosixPath

from ai_rules.source.models import Origin
from ai_rules.source.resolver import SourceTreeResolver, load_local_documents


def test_resolve_categorizes_documents(populated_source: Path) -> None:
    tree = SourceTreeResolver(populated_source).resolve()

    assert tree.base_index is not None
    assert tree.base_index.content == "# Base rules\n"
    assert [doc.path.as_posix() for doc in tree.base] == ["general-style.md", "index.md"]
    assert [doc.name for doc in tree.optional_docs] == ["react", "vue"]
    assert [doc.path.as_posix() for doc in tree.personas] == ["personas/reviewer.md"]
    assert [doc.path.as_posix() for doc in tree.commands] == ["commands/git/commit.md"]
    assert tree.warnings == ()


def test_resolve_excludes_modes_from_documents(populated_source: Path) -> None:
    tree = SourceTreeResolver(populated_source).resolve()

    assert all(doc.path.parts[0] != "modes" for doc in tree.documents)
    assert [path.name for path in tree.mode_dirs] == ["architect"]


def test_resolve_documents_in_traversal_order(populated_source: Path) -> None:
    tree = SourceTreeResolver(populated_source).resolve()

    assert [doc.path.as_posix() for doc in tree.documents] == [
        "ai-docs/react.md",
        "ai-docs/vue.md",
        "commands/git/commit.md",
        "general-style.md",
        "index.md",
        "personas/reviewer.md",
    ]


def test_category_path_strips_category_dir(populated_source: Path) -> None:
    tree = SourceTreeResolver(populated_source).resolve()

    assert tree.commands[0].category_path == PurePosixPath("git/commit.md")
    assert tree.base_index is not None
    assert tree.base_index.category_path == PurePosixPath("index.md")


def test_resolve_missing_root_warns(tmp_path: Path) -> None:
    tree = SourceTreeResolver(tmp_path / "nope").resolve()

    assert tree.documents == ()
    assert tree.mode_dirs == ()
    assert len(tree.warnings) == 1
    assert "Source root not found" in tree.warnings[0]


def test_resolve_missing_categories_warn(source_root: Path, write_text) -> None:
    write_text(source_root / "index.md", "index")

    tree = SourceTreeResolver(source_root).resolve()

    assert [doc.origin for doc in tree.documents] == [Origin.BASE]
    joined = "\n".join(tree.warnings)
    for name in ("ai-docs", "personas", "commands", "modes"):
        assert name in joined


def test_resolve_missing_index_warns(source_root: Path, write_text) -> None:
    write_text(source_root / "other.md", "other")

    tree = SourceTreeResolver(source_root).resolve()

    assert tree.base_index is None
    assert any("Base index not found" in item for item in tree.warnings)


def test_select_docs_orders_and_warns(populated_source: Path) -> None:
    tree = SourceTreeResolver(populated_source).resolve()

    narrowed, warnings = tree.select_docs(["vue", "angular", "react"])

    assert [doc.name for doc in narrowed.optional_docs] == ["vue", "react"]
    assert warnings == ["Optional doc not found, skipped: angular"]


def test_select_docs_drops_unselected_from_documents(populated_source: Path) -> None:
    tree = SourceTreeResolver(populated_source).resolve()

    narrowed, _ = tree.select_docs(["react"])

    optional = [doc for doc in narrowed.documents if doc.origin == Origin.OPTIONAL_DOC]
    assert [doc.name for doc in optional] == ["react"]
    assert len(narrowed.documents) == len(tree.documents) - 1


def test_load_local_documents(output_root: Path, local_root: Path, write_text) -> None:
    write_text(local_root / "b.md", "b")
    write_text(local_root / "sub" / "a.md", "a")

    documents, warnings = load_local_documents(output_root)

    assert warnings == []
    assert [doc.path.as_posix() for doc in documents] == ["b.md", "sub/a.md"]
    assert all(doc.origin == Origin.LOCAL for doc in documents)


def test_load_local_documents_missing_dir(output_root: Path) -> None:
    documents, warnings = load_local_documents(output_root)

    assert documents == []
    assert len(warnings) == 1
