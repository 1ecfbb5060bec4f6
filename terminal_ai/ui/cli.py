"""Main CLI entry point - a single command that prints one suggestion."""

import logging
import sys
from typing import List, Optional

import typer

from terminal_ai.core.configs import AdapterConfig, load_config
from terminal_ai.core.suggestion import generate_suggestion
from terminal_ai.ui.output import encode_line, format_suggestion

LOG_FORMAT = "[terminal-ai] %(message)s"

app = typer.Typer(
    add_completion=False,
    help="terminal-ai - turn a natural-language request into a shell command.",
)


def configure_logging(config: AdapterConfig) -> None:
    """
    Send package logs to stderr; stdout is reserved for the suggestion.

    Errors are always shown, debug diagnostics only with TERMINAL_AI_DEBUG.
    """
    logger = logging.getLogger("terminal_ai")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if config.debug else logging.WARNING)
    logger.propagate = False


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def suggest(
    query: Optional[List[str]] = typer.Argument(None, help="Words of the natural-language request"),
) -> None:
    """
    Print a shell command for the request.

    Example: terminal-ai list files sorted by size
    """
    if not query:
        raise typer.Exit(1)

    config = load_config()
    configure_logging(config)

    result = generate_suggestion(" ".join(query), config)
    line = format_suggestion(result.suggestion, json_output=config.json_output)
    typer.echo(encode_line(line))


def run() -> None:
    """Entry point for console script mapping."""
    app()


if __name__ == "__main__":
    run()
