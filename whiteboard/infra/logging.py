"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from engine.api.logging import EngineLoggingConfig, configure_logging


def setup_logging() -> str | None:
    """Configure application logging. Return the run log file path, if any."""
    level_name = os.getenv("WHITEBOARD_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    file_path = _resolve_run_log_file_path()
    configure_logging(
        EngineLoggingConfig(
            level_name=level_name,
            console_format=console_format,
            file_path=file_path,
            file_format="json",
        )
    )
    logging.getLogger(__name__).info("logging_configured level=%s file=%s", level_name, file_path)
    return file_path


def _resolve_run_log_file_path() -> str | None:
    configured = os.getenv("WHITEBOARD_LOG_DIR", "").strip()
    if not configured:
        return None
    base_dir = Path(configured)
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"whiteboard_run_{stamp}.jsonl")
