"""Rendering of one documented field into an apiDoc parameter line.

The line grammar is ``{typeExpr} nameExpr description``:

- ``typeExpr`` is the base type, an optional ``{min..max}`` size range and an
  optional ``="a,b"`` list of allowed values, in that order.
- ``nameExpr`` is the field name with an optional ``=<json default>`` suffix,
  wrapped in ``[...]`` when the field is optional.

Optional facts are tested with JavaScript truthiness, so a bound of ``0`` or a
default of ``false`` renders exactly as if it were absent.
"""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

DEFAULT_PAD = " "


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def js_truthy(value: object) -> bool:
    if value is None or value is MISSING or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def js_literal(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(js_literal(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _integral_floats_as_ints(value: object) -> object:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_integral_floats_as_ints(item) for item in value]
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    return value


def json_literal(value: object) -> str:
    return json.dumps(_integral_floats_as_ints(value), separators=(",", ":"), ensure_ascii=False)


def _size_suffix(size_min: object, size_max: object) -> str:
    if not (js_truthy(size_min) or js_truthy(size_max)):
        return ""
    low = js_literal(size_min) if js_truthy(size_min) else ""
    high = js_literal(size_max) if js_truthy(size_max) else ""
    return f"{{{low}..{high}}}"


def _allowed_suffix(allowed_values: object) -> str:
    if not js_truthy(allowed_values):
        return ""
    if isinstance(allowed_values, str):
        return f'="{allowed_values}"'
    if isinstance(allowed_values, Sequence):
        return '="' + ",".join(js_literal(value) for value in allowed_values) + '"'
    return f'="{js_literal(allowed_values)}"'


def format_type_expression(base_type: str, size_min: object = None, size_max: object = None, allowed_values: object = None) -> str:
    return base_type + _size_suffix(size_min, size_max) + _allowed_suffix(allowed_values)


def format_name_expression(name: str, is_required: bool, default_value: object = MISSING) -> str:
    if js_truthy(default_value):
        name += f"={json_literal(default_value)}"
    if not is_required:
        name = f"[{name}]"
    return name


def format_descriptor(
    name: str,
    base_type: str,
    size_min: object = None,
    size_max: object = None,
    allowed_values: object = None,
    is_required: bool = False,
    default_value: object = MISSING,
    description: str | None = None,
) -> str:
    type_expr = format_type_expression(base_type, size_min, size_max, allowed_values)
    name_expr = format_name_expression(name, is_required, default_value)
    text = description if js_truthy(description) else ""
    return f"{{{type_expr}}} {name_expr} {text}"


@dataclass(frozen=True)
class Descriptor:
    depth: int
    name: str
    required: bool
    type_expression: str
    default: Any = MISSING
    description: str = ""

    def padded_name(self, pad: str = DEFAULT_PAD) -> str:
        return pad * self.depth + self.name

    def render(self, pad: str = DEFAULT_PAD) -> str:
        name_expr = format_name_expression(self.padded_name(pad), self.required, self.default)
        return f"{{{self.type_expression}}} {name_expr} {self.description}"
