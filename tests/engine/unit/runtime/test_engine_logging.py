from __future__ import annotations

import json
import logging
import sys

from engine.api.logging import EngineLoggingConfig, JsonFormatter
from engine.runtime.logging import configure_engine_logging, setup_engine_logging, stop_engine_logging


def test_setup_engine_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("ENGINE_LOG_LEVEL", "DEBUG")
        setup_engine_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_engine_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_engine_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_engine_logging_with_file_writes_json(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_engine_logging(
            EngineLoggingConfig(level_name="INFO", file_path=str(log_file), file_format="json")
        )
        logging.getLogger("whiteboard.test").info("shape_added id=%s", "a", extra={"shape_id": "a"})
        stop_engine_logging()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["msg"] == "shape_added id=a"
        assert payload["logger"] == "whiteboard.test"
        assert payload["fields"]["shape_id"] == "a"
    finally:
        stop_engine_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_includes_exception_text() -> None:
    formatter = JsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.getLogger("x").makeRecord(
            "x", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
        )
    payload = json.loads(formatter.format(record))
    assert payload["level"] == "ERROR"
    assert "ValueError: boom" in payload["exc_info"]
