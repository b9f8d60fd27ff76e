from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import CompositionUnsupportedError, SchemaShapeError
from .descriptor import DEFAULT_PAD, Descriptor
from .walker import required_names, walk_properties


def ensure_object_root(schema: Any) -> Mapping[str, Any]:
    if not isinstance(schema, Mapping) or schema.get("type") != "object":
        raise SchemaShapeError("expecting object on top of schema")
    return schema


def extract_descriptors(schema: Any) -> list[Descriptor]:
    if isinstance(schema, Mapping) and "allOf" in schema:
        raise CompositionUnsupportedError("allOf composition is not supported: merge the schemas before referencing them")
    root = ensure_object_root(schema)
    return walk_properties([], root.get("properties"), 0, required_names(root))


def extract_arguments(schema: Any, pad: str = DEFAULT_PAD) -> list[str]:
    return [descriptor.render(pad) for descriptor in extract_descriptors(schema)]
