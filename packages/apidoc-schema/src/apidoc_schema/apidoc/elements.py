"""apiDoc tags that point at a schema file instead of describing one field.

``@apiParam (body) {schema} schemas/user.yaml`` expands to one ``@apiParam``
per field of the referenced schema, each carrying the same group.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.logging import log_event
from ..schema.extract import extract_arguments
from ..schema.resolver import resolve_schema

if TYPE_CHECKING:
    from ..core.context import RunContext

SCHEMA_TYPE = "schema"
DESCRIBED_ELEMENTS = ("apiParam", "apiSuccess")

TYPED_CONTENT_RE = re.compile(r"\{(.+)\}(.+)")
GROUP_RE = re.compile(r"\((.+)\).+\{")


@dataclass(frozen=True)
class Element:
    source: str
    name: str
    source_name: str
    content: str

    @classmethod
    def from_tag(cls, source_name: str, content: str) -> "Element":
        return cls(source=f"@{source_name} {content}", name=source_name.lower(), source_name=source_name, content=content)


def parse_schema_tag(content: str) -> tuple[str | None, str] | None:
    match = TYPED_CONTENT_RE.search(content)
    if match is None or match.group(1) != SCHEMA_TYPE:
        return None
    group_match = GROUP_RE.search(content)
    group = group_match.group(1) if group_match else None
    return group, match.group(2).strip()


def render_schema_reference(
    group: str | None,
    schema_path: str,
    base_dir: Path | None = None,
    ctx: RunContext | None = None,
) -> list[str]:
    schema = resolve_schema(schema_path, base_dir, ctx, check=bool(ctx and ctx.strict))
    lines = extract_arguments(schema)
    if group:
        return [f"({group}) {line}" for line in lines]
    return lines


def expand_element(element: Element, base_dir: Path | None = None, ctx: RunContext | None = None) -> list[Element]:
    if element.source_name not in DESCRIBED_ELEMENTS:
        return [element]
    parsed = parse_schema_tag(element.content)
    if parsed is None:
        return [element]
    group, schema_path = parsed
    expanded = [
        replace(element, source=f"@{element.source_name} {content}", content=content)
        for content in render_schema_reference(group, schema_path, base_dir, ctx)
    ]
    log_event(ctx, "debug", "apidoc", "expand", tag=element.source_name, schema=schema_path, fields=len(expanded))
    return expanded


def expand_elements(elements: Iterable[Element], base_dir: Path | None = None, ctx: RunContext | None = None) -> list[Element]:
    out: list[Element] = []
    for element in elements:
        out.extend(expand_element(element, base_dir, ctx))
    return out
