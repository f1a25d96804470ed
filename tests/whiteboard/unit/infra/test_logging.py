from __future__ import annotations

from pathlib import Path

import whiteboard.infra.logging as logging_module


def _capture(monkeypatch) -> list:
    seen: list = []
    monkeypatch.setattr(logging_module, "configure_logging", seen.append)
    return seen


def test_setup_logging_defaults_to_text_console_only(monkeypatch) -> None:
    seen = _capture(monkeypatch)
    for key in ("WHITEBOARD_LOG_LEVEL", "LOG_LEVEL", "LOG_FORMAT", "WHITEBOARD_LOG_DIR"):
        monkeypatch.delenv(key, raising=False)

    assert logging_module.setup_logging() is None

    config = seen[0]
    assert config.level_name == "INFO"
    assert config.console_format == "text"
    assert config.file_path is None


def test_setup_logging_prefers_app_level_over_generic(monkeypatch) -> None:
    seen = _capture(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("WHITEBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.delenv("WHITEBOARD_LOG_DIR", raising=False)

    logging_module.setup_logging()

    assert seen[0].level_name == "DEBUG"
    assert seen[0].console_format == "json"


def test_setup_logging_creates_run_log_in_configured_dir(tmp_path, monkeypatch) -> None:
    seen = _capture(monkeypatch)
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("WHITEBOARD_LOG_DIR", str(log_dir))

    file_path = logging_module.setup_logging()

    assert file_path is not None
    path = Path(file_path)
    assert path.parent == log_dir
    assert log_dir.is_dir()
    assert path.name.startswith("whiteboard_run_") and path.suffix == ".jsonl"
    assert seen[0].file_path == file_path
    assert seen[0].file_format == "json"
