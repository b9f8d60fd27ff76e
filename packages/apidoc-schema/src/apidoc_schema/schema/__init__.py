from .descriptor import Descriptor, format_descriptor
from .extract import extract_arguments, extract_descriptors
from .resolver import resolve_schema
from .walker import walk_properties

__all__ = [
    "Descriptor",
    "extract_arguments",
    "extract_descriptors",
    "format_descriptor",
    "resolve_schema",
    "walk_properties",
]
