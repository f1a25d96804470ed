"""Surface failures and tolerated backend quirks."""

from __future__ import annotations

import logging


class SurfaceUnavailableError(RuntimeError):
    """Raised when a drawing surface cannot be created or configured."""


# Failures a canvas backend may raise for optional capabilities
# (cursor shapes, size queries). Anything else propagates.
BACKEND_QUIRK_ERRORS: tuple[type[Exception], ...] = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
)


def log_recoverable(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.DEBUG,
    **fields: object,
) -> None:
    """Log a tolerated failure with its traceback and ``key=value`` context."""
    if not fields:
        logger.log(level, event, exc_info=True)
        return
    context = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    logger.log(level, "%s %s", event, context, exc_info=True)
