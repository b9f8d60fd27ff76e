from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from .elements import Element, expand_element

if TYPE_CHECKING:
    from ..core.context import RunContext

TAG_LINE_RE = re.compile(r"^(?P<prefix>[^@\n]*)@(?P<tag>api[A-Za-z]+)[ \t]+(?P<content>\S.*?)[ \t]*$")


def parse_element(line: str) -> tuple[str, Element] | None:
    match = TAG_LINE_RE.match(line)
    if match is None:
        return None
    return match.group("prefix"), Element.from_tag(match.group("tag"), match.group("content"))


def _line_ending(line: str) -> str:
    for ending in ("\r\n", "\n", "\r"):
        if line.endswith(ending):
            return ending
    return ""


def expand_source(text: str, base_dir: Path | None = None, ctx: RunContext | None = None) -> str:
    out: list[str] = []
    for line in text.splitlines(keepends=True):
        ending = _line_ending(line)
        parsed = parse_element(line[: len(line) - len(ending)])
        if parsed is None:
            out.append(line)
            continue
        prefix, element = parsed
        expanded = expand_element(element, base_dir, ctx)
        if expanded == [element]:
            out.append(line)
            continue
        if expanded:
            out.append((ending or "\n").join(f"{prefix}{item.source}" for item in expanded) + ending)
    return "".join(out)


def expand_file(path: Path, ctx: RunContext, in_place: bool = False) -> tuple[bool, str]:
    original = path.read_text(encoding="utf-8")
    expanded = expand_source(original, ctx.base_dir, ctx)
    changed = expanded != original
    if changed and in_place:
        path.write_text(expanded, encoding="utf-8")
    return changed, expanded
