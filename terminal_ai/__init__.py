"""terminal-ai: natural-language to shell command adapter for terminal integrations."""

__version__ = "0.1.0"
