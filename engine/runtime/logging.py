"""Root logger wiring: console output plus an optional queued run-log file."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from engine.api.logging import EngineLoggingConfig, JsonFormatter
from engine.runtime.config import resolve_log_level_name

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_listener: QueueListener | None = None


def configure_engine_logging(config: EngineLoggingConfig) -> None:
    """Replace root handlers according to ``config``.

    Console-only setups log synchronously. When a file path is given, both
    sinks are fed from a queue so file writes never stall a frame.
    """
    stop_engine_logging()
    sinks = _build_sinks(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(sinks) == 1:
        root.addHandler(sinks[0])
        return
    _start_listener(root, sinks)


def stop_engine_logging() -> None:
    """Flush and stop the queued sinks, if running."""
    global _listener

    if _listener is None:
        return
    _listener.stop()
    _listener = None


def setup_engine_logging() -> None:
    """Install console logging at the env-resolved level unless the host already has handlers."""
    if logging.getLogger().handlers:
        return
    configure_engine_logging(EngineLoggingConfig(level_name=resolve_log_level_name(default="INFO")))


def _build_sinks(config: EngineLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    sinks: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        run_log = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        run_log.setFormatter(_formatter_for(config.file_format))
        sinks.append(run_log)
    return sinks


def _start_listener(root: logging.Logger, sinks: list[logging.Handler]) -> None:
    global _listener

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, *sinks, respect_handler_level=True)
    _listener.start()


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_LOG_FORMAT)
