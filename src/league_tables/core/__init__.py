"""Core infrastructure: configuration and logging helpers used by the CLI and the API."""
