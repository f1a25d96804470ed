"""Engine runtime modules."""

from engine.runtime.config import RuntimeConfig, SurfaceConfig, load_runtime_config
from engine.runtime.errors import SurfaceUnavailableError
from engine.runtime.logging import configure_engine_logging, setup_engine_logging

__all__ = [
    "RuntimeConfig",
    "SurfaceConfig",
    "SurfaceUnavailableError",
    "configure_engine_logging",
    "load_runtime_config",
    "setup_engine_logging",
]
