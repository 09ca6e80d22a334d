from collections.abc import Iterable, Iterator
from pathlib import Path, PurePosixPath

from ai_rules.constants import RULE_SUFFIX


def walk_documents(
    directory: Path,
    exclude: Iterable[str] = (),
    suffix: str = RULE_SUFFIX,
) -> Iterator[tuple[PurePosixPath, str]]:
    """Yield ``(relative path, content)`` for every rule file below ``directory``.

    Entries are visited in name order, depth first. Directories named in
    ``exclude`` are skipped at any depth. Symlinked directories are not
    followed. Calling again restarts the walk.
    """
    excluded = frozenset(exclude)
    if not directory.is_dir():
        return
    yield from _walk(directory, PurePosixPath(), excluded, suffix)


def _walk(
    directory: Path,
    prefix: PurePosixPath,
    excluded: frozenset[str],
    suffix: str,
) -> Iterator[tuple[PurePosixPath, str]]:
    for child in sorted(directory.iterdir(), key=lambda item: item.name):
        if child.is_dir():
            if child.name in excluded or child.is_symlink():
                continue
            yield from _walk(child, prefix / child.name, excluded, suffix)
        elif child.is_file() and child.name.endswith(suffix):
            yield prefix / child.name, child.read_text(encoding="utf-8")
