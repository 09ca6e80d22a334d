import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_json(path), None
    except Exception as exc:
        return None, str(exc)


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, sort_keys=False) + "\n"


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json(payload), encoding="utf-8")


def read_text_if_exists(path: Path) -> str | None:
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8")


def file_matches(path: Path, content: str) -> bool:
    """Byte comparison, so an undecodable destination simply differs."""
    return path.is_file() and path.read_bytes() == content.encode("utf-8")


def join_with_separator(existing: str, addition: str, separator: str) -> str:
    """Append ``addition`` after making sure ``existing`` ends with ``separator``.

    A partially present separator is completed rather than repeated, so an
    existing trailing newline counts toward a blank-line separator.
    """
    if not existing:
        return addition
    for overlap in range(len(separator), 0, -1):
        if existing.endswith(separator[:overlap]):
            return existing + separator[overlap:] + addition
    return existing + separator + addition


def compact_path(path: str | Path, root: Path) -> str:
    text = str(path)
    prefix = f"{root}/"
    if text.startswith(prefix):
        return text[len(prefix) :]
    return text


def compact_paths_in_text(text: str, root: Path) -> str:
    return text.replace(f"{root}/", "")
