"""Formatting of the suggestion for stdout."""

import json
import os

from terminal_ai.core.suggestion import Suggestion


def format_plain(suggestion: Suggestion) -> str:
    return suggestion.command


def format_json(suggestion: Suggestion) -> str:
    """Single-line JSON object, no extra whitespace."""
    return json.dumps(
        {"command": suggestion.command},
        separators=(",", ":"),
        ensure_ascii=False,
    )


def format_suggestion(suggestion: Suggestion, json_output: bool = False) -> str:
    """
    Render a suggestion for the shell integration.

    Args:
        suggestion: The suggestion to render
        json_output: Emit {"command": ...} instead of the raw command

    Returns:
        The line to print, without trailing newline
    """
    if json_output:
        return format_json(suggestion)
    return format_plain(suggestion)


def encode_line(text: str) -> bytes:
    """
    Encode output for the binary stdout stream.

    Argument bytes that were not valid UTF-8 reach us as surrogate escapes;
    os.fsencode restores them so the query is echoed byte for byte.
    """
    try:
        return os.fsencode(text)
    except UnicodeEncodeError:
        return text.encode("utf-8", "replace")
