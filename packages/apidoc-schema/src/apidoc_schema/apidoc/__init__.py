from .elements import Element, expand_element, expand_elements, render_schema_reference
from .source import expand_file, expand_source

__all__ = [
    "Element",
    "expand_element",
    "expand_elements",
    "expand_file",
    "expand_source",
    "render_schema_reference",
]
