from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_COMPOSITION, ERR_INTERNAL, ERR_LOAD, ERR_RESOLUTION, ERR_SHAPE


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class SchemaLoadError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_LOAD, "load_error")


class SchemaResolutionError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_RESOLUTION, "resolution_error")


class SchemaReferenceNotFound(SchemaResolutionError):
    """A referenced document does not exist relative to the attempted base directory."""


class SchemaShapeError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_SHAPE, "shape_error")


class CompositionUnsupportedError(ScriptError):
    def __init__(self, message: str = "allOf composition is not supported") -> None:
        super().__init__(message, ERR_COMPOSITION, "composition_unsupported")
