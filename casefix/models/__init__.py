"""Data models: case styles and rename results."""
