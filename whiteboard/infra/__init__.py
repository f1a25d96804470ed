"""Process-level concerns: env files and logging."""
