"""Surface engine: input capture, render backends, runtime config and logging."""
