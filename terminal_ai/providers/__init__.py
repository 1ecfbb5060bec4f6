"""Provider implementations for terminal-ai."""

from terminal_ai.providers.gemini import GeminiAgent

__all__ = ["GeminiAgent"]
