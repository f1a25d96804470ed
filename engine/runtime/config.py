"""Centralized runtime configuration ownership for engine execution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_SURFACE_WIDTH = 800
DEFAULT_SURFACE_HEIGHT = 600
DEFAULT_BACKGROUND_COLOR = "#D7D7D7"
DEFAULT_TITLE = "Whiteboard"


@dataclass(frozen=True, slots=True)
class SurfaceConfig:
    width: int = DEFAULT_SURFACE_WIDTH
    height: int = DEFAULT_SURFACE_HEIGHT
    background_color: str = DEFAULT_BACKGROUND_COLOR
    title: str = DEFAULT_TITLE


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    surface: SurfaceConfig = field(default_factory=SurfaceConfig)
    headless: bool = False
    log_level: str = "INFO"
    input_trace_enabled: bool = False


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _resolution(raw: str) -> tuple[int, int] | None:
    value = str(raw).strip().lower()
    if not value:
        return None
    normalized = value.replace(" ", "")
    for sep in ("x", ",", ":"):
        if sep in normalized:
            left, right = normalized.split(sep, 1)
            try:
                width = max(1, int(left))
                height = max(1, int(right))
            except ValueError:
                return None
            return (width, height)
    return None


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve runtime log level with engine-prefixed override."""
    value = _raw("ENGINE_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_surface_config(*, env: Mapping[str, str] | None = None) -> SurfaceConfig:
    size = _resolution(_text("WHITEBOARD_SURFACE_SIZE", "", env=env))
    width, height = size if size is not None else (DEFAULT_SURFACE_WIDTH, DEFAULT_SURFACE_HEIGHT)
    return SurfaceConfig(
        width=width,
        height=height,
        background_color=_text("WHITEBOARD_BACKGROUND", DEFAULT_BACKGROUND_COLOR, env=env),
        title=_text("WHITEBOARD_TITLE", DEFAULT_TITLE, env=env),
    )


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    """Build immutable runtime config from the process env or an explicit mapping."""
    return RuntimeConfig(
        surface=load_surface_config(env=env),
        headless=_flag("WHITEBOARD_HEADLESS", False, env=env),
        log_level=resolve_log_level_name(env=env),
        input_trace_enabled=_flag("ENGINE_INPUT_TRACE_ENABLED", False, env=env),
    )
