"""Configuration entrypoints (`.env` loading and loyalty rules)."""
