from __future__ import annotations

import os

from whiteboard.infra.config import load_default_env_files, load_env_file


def test_load_env_file_parses_pairs_and_skips_noise(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "# surface",
                "WHITEBOARD_SURFACE_SIZE=1024x768",
                "",
                "not a pair",
                "=orphan",
                'WHITEBOARD_TITLE="Team board"',
                "WHITEBOARD_BACKGROUND='#FFFFFF'",
            ]
        ),
        encoding="utf-8",
    )
    for key in ("WHITEBOARD_SURFACE_SIZE", "WHITEBOARD_TITLE", "WHITEBOARD_BACKGROUND"):
        monkeypatch.delenv(key, raising=False)

    assert load_env_file(str(env_file)) is True

    assert os.environ["WHITEBOARD_SURFACE_SIZE"] == "1024x768"
    assert os.environ["WHITEBOARD_TITLE"] == "Team board"
    assert os.environ["WHITEBOARD_BACKGROUND"] == "#FFFFFF"


def test_load_env_file_respects_existing_when_not_overriding(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("WHITEBOARD_HEADLESS=1\n", encoding="utf-8")
    monkeypatch.setenv("WHITEBOARD_HEADLESS", "0")

    load_env_file(str(env_file), override_existing=False)

    assert os.environ["WHITEBOARD_HEADLESS"] == "0"


def test_load_env_file_reports_missing_file(tmp_path) -> None:
    assert load_env_file(str(tmp_path / "absent.env")) is False


def test_later_env_files_win(tmp_path, monkeypatch) -> None:
    base = tmp_path / "base.env"
    local = tmp_path / "local.env"
    base.write_text("WHITEBOARD_TITLE=Base\n", encoding="utf-8")
    local.write_text("WHITEBOARD_TITLE=Local\n", encoding="utf-8")
    monkeypatch.delenv("WHITEBOARD_TITLE", raising=False)

    load_default_env_files(paths=(str(base), str(local)))

    assert os.environ["WHITEBOARD_TITLE"] == "Local"
