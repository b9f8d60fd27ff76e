from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..errors import SchemaLoadError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


def locate_schema(schema_path: str | Path, base_dir: Path | None = None) -> Path:
    raw = Path(str(schema_path).strip())
    root = base_dir if base_dir is not None else Path.cwd()
    return (raw if raw.is_absolute() else root / raw).resolve()


def parse_document(text: str, suffix: str, origin: str = "<memory>") -> Any:
    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise SchemaLoadError(f"unable to load JSON schema - invalid content in {origin}: {exc}") from exc
    raise SchemaLoadError(f"unable to load JSON schema - file type not supported: {origin}")


def load_document(path: Path) -> Any:
    if not path.is_file():
        raise SchemaLoadError(f"unable to load JSON schema - file not exists: {path}")
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise SchemaLoadError(f"unable to load JSON schema - file type not supported: {path}")
    return parse_document(path.read_text(encoding="utf-8"), suffix, str(path))
