from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

LogFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    base_dir: Path
    log_json: bool
    verbose: bool = False
    quiet: bool = False
    strict: bool = False

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        base_dir: str | None = None,
        log_format: LogFormat | None = None,
        verbose: bool = False,
        quiet: bool = False,
        strict: bool = False,
    ) -> "RunContext":
        default_run = f"apidoc-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"
        resolved_run_id = run_id or os.environ.get("RUN_ID", default_run)
        raw_base = base_dir or os.environ.get("APIDOC_SCHEMA_BASE_DIR") or os.getcwd()
        resolved_format = log_format or os.environ.get("APIDOC_SCHEMA_LOG_FORMAT", "text")
        return cls(
            run_id=resolved_run_id,
            base_dir=Path(raw_base).resolve(),
            log_json=resolved_format == "json",
            verbose=verbose,
            quiet=quiet,
            strict=strict,
        )
