from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_DRIFT, ERR_LOAD, OK
from .elements import render_schema_reference
from .source import expand_file


def configure_describe_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("describe", help="print one apiDoc parameter line per schema field")
    p.add_argument("schema", help="schema file (.json, .yaml, .yml), relative to the base directory")
    p.add_argument("--group", help="apiDoc group prepended as `(group)` to every line")
    p.add_argument("--strict", action="store_true", help="check the resolved schema against its meta-schema")


def configure_expand_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("expand", help="expand `{schema}` apiDoc tags in source files")
    p.add_argument("files", nargs="+", help="source files holding apiDoc comment blocks")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--in-place", action="store_true", help="rewrite files instead of printing them")
    mode.add_argument("--check", action="store_true", help="fail when any file still holds `{schema}` tags")
    p.add_argument("--strict", action="store_true", help="check resolved schemas against their meta-schema")


def run_describe_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    for line in render_schema_reference(ns.group, ns.schema, ctx.base_dir, ctx):
        print(line)
    return OK


def run_expand_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    drifted: list[str] = []
    for raw in ns.files:
        path = Path(raw)
        if not path.is_file():
            raise ScriptError(f"source file not found: {raw}", ERR_LOAD, "load_error")
        changed, text = expand_file(path, ctx, in_place=ns.in_place)
        log_event(ctx, "info", "expand", "file", path=str(path), changed=changed)
        if changed:
            drifted.append(str(path))
        if not ns.in_place and not ns.check:
            sys.stdout.write(text)
    if ns.check and drifted:
        for path in drifted:
            print(f"unexpanded schema tags: {path}", file=sys.stderr)
        return ERR_DRIFT
    return OK
