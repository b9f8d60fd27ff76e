"""Inline every ``$ref`` of a schema document.

References are looked up through a ``referencing`` registry whose retrieval
reads ``file:`` URIs from disk. Resolution is attempted against an explicit base
directory; a schema file whose relative references are written against its own
directory is retried from there when the first attempt cannot find a file.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import urldefrag, urljoin, urlsplit
from urllib.request import url2pathname

from referencing import Registry, Resource
from referencing.exceptions import NoSuchResource, Unresolvable, Unretrievable
from referencing.jsonschema import DRAFT4

from ..core.logging import log_event
from ..errors import SchemaReferenceNotFound, SchemaResolutionError, SchemaShapeError
from .extract import ensure_object_root
from .loader import load_document, locate_schema, parse_document

if TYPE_CHECKING:
    from referencing._core import Resolver

    from ..core.context import RunContext

DEFAULT_DOCUMENT_NAME = "schema.json"


def _retrieve(uri: str) -> Resource[Any]:
    parts = urlsplit(uri)
    if parts.scheme != "file":
        raise SchemaResolutionError(f"unsupported reference location: {uri}")
    path = Path(url2pathname(parts.path))
    if not path.is_file():
        raise FileNotFoundError(str(path))
    document = parse_document(path.read_text(encoding="utf-8"), path.suffix.lower(), str(path))
    return Resource.from_contents(document, default_specification=DRAFT4)


def _missing_file(exc: BaseException) -> FileNotFoundError | None:
    seen: BaseException | None = exc
    while seen is not None:
        if isinstance(seen, FileNotFoundError):
            return seen
        seen = seen.__cause__ or seen.__context__
    return None


def _lookup(resolver: Resolver, base_uri: str, ref: str) -> tuple[Any, Resolver]:
    try:
        resolved = resolver.lookup(ref)
    except (Unresolvable, Unretrievable, NoSuchResource) as exc:
        missing = _missing_file(exc)
        if missing is not None:
            raise SchemaReferenceNotFound(f"unable to resolve $ref {ref!r} from {base_uri}: file not found {missing}") from exc
        raise SchemaResolutionError(f"unable to resolve $ref {ref!r} from {base_uri}: {exc}") from exc
    return resolved.contents, resolved.resolver


def _expand(node: Any, resolver: Resolver, base_uri: str, trail: frozenset[str]) -> Any:
    if isinstance(node, list):
        return [_expand(item, resolver, base_uri, trail) for item in node]
    if not isinstance(node, Mapping):
        return node
    ref = node.get("$ref")
    if not isinstance(ref, str):
        return {key: _expand(value, resolver, base_uri, trail) for key, value in node.items()}
    target = urljoin(base_uri, ref)
    if target in trail:
        raise SchemaResolutionError(f"circular $ref {ref!r} from {base_uri}")
    contents, inner = _lookup(resolver, base_uri, ref)
    resolved = _expand(contents, inner, urldefrag(target).url, trail | {target})
    siblings = {key: value for key, value in node.items() if key != "$ref"}
    if siblings and isinstance(resolved, dict):
        # Keywords written beside $ref override the referenced ones.
        merged = {key: _expand(value, resolver, base_uri, trail) for key, value in siblings.items()}
        for key, value in resolved.items():
            merged.setdefault(key, value)
        return merged
    return resolved


def dereference(document: Any, base_dir: Path, name: str = DEFAULT_DOCUMENT_NAME) -> Any:
    root_uri = (base_dir.resolve() / name).as_uri()
    resource = Resource.from_contents(document, default_specification=DRAFT4)
    registry: Registry[Any] = Registry(retrieve=_retrieve).with_resource(uri=root_uri, resource=resource)
    return _expand(document, registry.resolver(base_uri=root_uri), root_uri, frozenset())


def check_schema(schema: Mapping[str, Any]) -> None:
    import jsonschema

    validator_cls = jsonschema.validators.validator_for(schema, default=jsonschema.Draft4Validator)
    try:
        validator_cls.check_schema(schema)
    except jsonschema.exceptions.SchemaError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise SchemaShapeError(f"invalid JSON schema at {loc}: {exc.message}") from exc


def resolve_schema(
    path_or_spec: str | Path | Mapping[str, Any],
    base_dir: Path | None = None,
    ctx: RunContext | None = None,
    check: bool = False,
) -> dict[str, Any]:
    base = base_dir or (ctx.base_dir if ctx is not None else Path.cwd())
    if isinstance(path_or_spec, Mapping):
        schema = dereference(path_or_spec, base)
    else:
        path = locate_schema(path_or_spec, base)
        document = load_document(path)
        log_event(ctx, "debug", "schema", "loaded", path=str(path))
        try:
            schema = dereference(document, base, path.name)
        except SchemaReferenceNotFound as exc:
            if path.parent == base.resolve():
                raise
            log_event(ctx, "info", "schema", "retry_from_schema_dir", path=str(path), reason=str(exc))
            schema = dereference(document, path.parent, path.name)
    if check:
        check_schema(schema)
    return dict(ensure_object_root(schema))
