from __future__ import annotations

import argparse
import json
import sys

from . import __version__
from .apidoc.command import configure_describe_parser, configure_expand_parser, run_describe_command, run_expand_command
from .core.context import RunContext
from .core.logging import log_event
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL, ERR_USAGE


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="apidoc-schema")
    p.add_argument("--version", action="version", version=_version_string())
    p.add_argument("--run-id", help="run identifier attached to log events")
    p.add_argument("--base-dir", help="directory schema paths and references resolve against")
    p.add_argument("--log-format", choices=["text", "json"], default=None, help="log event format on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug log events")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="print the tool version")
    configure_describe_parser(sub)
    configure_expand_parser(sub)
    return p


def _version_string() -> str:
    return f"apidoc-schema {__version__}"


def _render_error(ctx: RunContext | None, message: str, code: int, kind: str) -> None:
    if ctx is not None and ctx.log_json:
        print(
            json.dumps(
                {
                    "schema_version": 1,
                    "tool": "apidoc-schema",
                    "status": "fail",
                    "error": {"message": message, "code": code, "kind": kind},
                },
                sort_keys=True,
            ),
            file=sys.stderr,
        )
    else:
        print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    ctx: RunContext | None = None
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            ns.base_dir,
            ns.log_format,
            ns.verbose,
            ns.quiet,
            bool(getattr(ns, "strict", False)),
        )
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, base_dir=str(ctx.base_dir))
        if ns.cmd == "version":
            print(_version_string())
            return 0
        if ns.cmd == "describe":
            return run_describe_command(ctx, ns)
        if ns.cmd == "expand":
            return run_expand_command(ctx, ns)
        return ERR_USAGE
    except ScriptError as exc:
        _render_error(ctx, str(exc), exc.code, exc.kind)
        return exc.code
    except Exception as exc:  # pragma: no cover
        _render_error(ctx, f"internal error: {exc}", ERR_INTERNAL, "internal_error")
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
