#!/usr/bin/env python3
"""
Main entry point for the terminal-ai CLI.

Delegates to terminal_ai.ui.cli so the console script mapping stays stable.
"""

from terminal_ai.ui.cli import run as terminal_ai


if __name__ == "__main__":
    terminal_ai()
