"""Prompt template and request body for the generateContent call."""

import json

from terminal_ai.context.sources.shell import RequestPayload
from terminal_ai.core.errors import RequestBuildError


PROMPT_TEMPLATE = """You are a terminal assistant. Given the following context:
Command History: {history}
Last Output: {last_output}
Clipboard: {clipboard}

User Query: {query}

Respond with ONLY the shell command to execute (no explanation, no markdown, just the raw command)."""


def build_prompt(payload: RequestPayload) -> str:
    """
    Interpolate the payload into the fixed instruction template.

    Empty fields are rendered as empty segments.
    """
    return PROMPT_TEMPLATE.format(
        history="; ".join(payload.command_history),
        last_output=payload.last_command_output,
        clipboard=payload.user_clipboard,
        query=payload.user_query,
    )


def build_request_body(payload: RequestPayload) -> dict:
    """Wrap the prompt in the contents/parts envelope."""
    return {
        "contents": [
            {
                "parts": [
                    {"text": build_prompt(payload)},
                ],
            },
        ],
    }


def encode_request_body(payload: RequestPayload) -> bytes:
    """Serialize the request body to JSON bytes."""
    try:
        return json.dumps(build_request_body(payload)).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise RequestBuildError("failed to marshal request", original_error=e) from e
