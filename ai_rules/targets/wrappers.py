"""Per-tool content wrapping."""

from __future__ import annotations

import yaml

from ai_rules.source.models import RuleDocument


def describe(document: RuleDocument) -> str:
    return document.name.replace("-", " ")


def cursor_front_matter(description: str, always_apply: bool = False) -> str:
    fm: dict = {"description": description, "alwaysApply": always_apply}
    parts: list[str] = []
    parts.append("---")
    parts.append(yaml.dump(fm, default_flow_style=False, sort_keys=False).rstrip())
    parts.append("---")
    parts.append("")
    return "\n".join(parts) + "\n"


def wrap_cursor_rule(document: RuleDocument) -> str:
    """Prefix the body with Cursor .mdc front matter."""
    return cursor_front_matter(f"Rule for {describe(document)}") + document.content


def wrap_cursor_local_rule(document: RuleDocument) -> str:
    return cursor_front_matter(f"Local rule for {describe(document)}") + document.content
