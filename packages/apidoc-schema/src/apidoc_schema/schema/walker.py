from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from .descriptor import MISSING, Descriptor, format_type_expression, js_truthy

SCALAR_TYPES = frozenset({"string", "number", "integer", "boolean"})


def _description(node: Mapping[str, Any]) -> str:
    for key in ("title", "description"):
        value = node.get(key)
        if js_truthy(value):
            return str(value)
    return ""


def _string_label(node: Mapping[str, Any]) -> str:
    qualifier = node.get("format") if js_truthy(node.get("format")) else node.get("pattern")
    if js_truthy(qualifier):
        return f"{node['type']} / {qualifier}"
    return str(node["type"])


def _numeric_bounds(node: Mapping[str, Any]) -> tuple[Any, Any]:
    minimum = node.get("minimum")
    maximum = node.get("maximum")
    low = None
    high = None
    if js_truthy(minimum):
        low = minimum + 1 if js_truthy(node.get("exclusiveMinimum")) else minimum
    if js_truthy(maximum):
        high = maximum - 1 if js_truthy(node.get("exclusiveMaximum")) else maximum
    return low, high


def build_descriptor(name: str, node: Mapping[str, Any], depth: int, required: bool) -> Descriptor:
    kind = node.get("type")
    size_min: Any = None
    size_max: Any = None
    allowed: Any = None
    label = str(kind)
    if kind == "string":
        label = _string_label(node)
        size_min, size_max = node.get("minLength"), node.get("maxLength")
        allowed = node.get("enum")
    elif kind in {"number", "integer"}:
        size_min, size_max = _numeric_bounds(node)
        allowed = node.get("enum")
    elif kind == "array":
        size_min, size_max = node.get("minItems"), node.get("maxItems")
    elif kind != "boolean":
        raise ValueError(f"not a leaf schema type: {kind!r}")
    return Descriptor(
        depth=depth,
        name=name,
        required=required,
        type_expression=format_type_expression(label, size_min, size_max, allowed),
        default=node.get("default", MISSING),
        description=_description(node),
    )


def required_names(node: Mapping[str, Any]) -> frozenset[str]:
    names = node.get("required")
    if isinstance(names, (list, tuple, set, frozenset)):
        return frozenset(str(name) for name in names)
    return frozenset()


def _array_members(items: Any) -> list[Any]:
    if isinstance(items, Mapping):
        return [items]
    if isinstance(items, (list, tuple)):
        return list(items)
    return []


def _walk_member(accumulator: list[Descriptor], name: str, member: Any, depth: int) -> None:
    if not isinstance(member, Mapping):
        return
    kind = member.get("type")
    if not isinstance(kind, str):
        return
    if kind == "object":
        walk_properties(accumulator, member.get("properties"), depth, required_names(member))
    elif kind == "array" and js_truthy(member.get("items")):
        for nested in _array_members(member["items"]):
            _walk_member(accumulator, name, nested, depth + 1)
    elif kind in SCALAR_TYPES or kind == "array":
        accumulator.append(build_descriptor(name, member, depth, False))


def walk_properties(
    accumulator: list[Descriptor],
    properties: Mapping[str, Any] | None,
    depth: int = 0,
    required: Collection[str] = (),
) -> list[Descriptor]:
    """Append one descriptor per leaf under ``properties``, depth first, in mapping order.

    ``required`` holds the names required by the object that owns ``properties``;
    nested objects, including object members of an array, switch to their own list.
    """
    for name, node in (properties or {}).items():
        if not isinstance(node, Mapping):
            continue
        kind = node.get("type")
        if not isinstance(kind, str):
            continue
        if kind == "object":
            walk_properties(accumulator, node.get("properties"), depth + 1, required_names(node))
        elif kind == "array" and js_truthy(node.get("items")):
            for member in _array_members(node["items"]):
                _walk_member(accumulator, name, member, depth + 1)
        elif kind in SCALAR_TYPES or kind == "array":
            accumulator.append(build_descriptor(name, node, depth, name in required))
    return accumulator
