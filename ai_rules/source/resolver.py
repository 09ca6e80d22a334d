from pathlib import Path, PurePosixPath

from ai_rules.constants import (
    COMMANDS_DIRNAME,
    INDEX_FILENAME,
    LOCAL_RULES_DIRNAME,
    MODES_DIRNAME,
    OPTIONAL_DOCS_DIRNAME,
    PERSONAS_DIRNAME,
)
from ai_rules.source.models import Origin, RuleDocument, SourceTree
from ai_rules.source.walker import walk_documents

CATEGORY_ORIGINS: dict[str, Origin] = {
    OPTIONAL_DOCS_DIRNAME: Origin.OPTIONAL_DOC,
    PERSONAS_DIRNAME: Origin.PERSONA,
    COMMANDS_DIRNAME: Origin.COMMAND,
}


def _origin_for(path: PurePosixPath) -> Origin:
    if len(path.parts) > 1:
        return CATEGORY_ORIGINS.get(path.parts[0], Origin.BASE)
    return Origin.BASE


class SourceTreeResolver:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self) -> SourceTree:
        if not self._root.is_dir():
            return SourceTree(
                root=self._root,
                warnings=(f"Source root not found, nothing to sync: {self._root}",),
            )

        warnings: list[str] = []
        if not (self._root / INDEX_FILENAME).is_file():
            warnings.append(f"Base index not found: {self._root / INDEX_FILENAME}")
        for dirname in (*CATEGORY_ORIGINS, MODES_DIRNAME):
            if not (self._root / dirname).is_dir():
                warnings.append(f"Source directory not found: {self._root / dirname}")

        documents = tuple(
            RuleDocument(path=path, content=content, origin=_origin_for(path))
            for path, content in walk_documents(self._root, exclude=(MODES_DIRNAME,))
        )

        return SourceTree(
            root=self._root,
            base=tuple(d for d in documents if d.origin == Origin.BASE),
            optional_docs=tuple(d for d in documents if d.origin == Origin.OPTIONAL_DOC),
            personas=tuple(d for d in documents if d.origin == Origin.PERSONA),
            commands=tuple(d for d in documents if d.origin == Origin.COMMAND),
            mode_dirs=self._mode_dirs(),
            documents=documents,
            warnings=tuple(warnings),
        )

    def _mode_dirs(self) -> tuple[Path, ...]:
        modes_root = self._root / MODES_DIRNAME
        if not modes_root.is_dir():
            return ()
        return tuple(
            sorted(
                (child for child in modes_root.iterdir() if child.is_dir()),
                key=lambda item: item.name,
            )
        )


def load_local_documents(output_root: Path) -> tuple[list[RuleDocument], list[str]]:
    local_root = output_root / LOCAL_RULES_DIRNAME
    if not local_root.is_dir():
        return [], [f"No local overrides directory, skipped: {local_root}"]
    documents = [
        RuleDocument(path=path, content=content, origin=Origin.LOCAL)
        for path, content in walk_documents(local_root)
    ]
    return documents, []
