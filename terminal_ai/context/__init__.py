"""Request context and prompt construction."""

from terminal_ai.context.prompt import (
    build_prompt,
    build_request_body,
    encode_request_body,
)
from terminal_ai.context.sources.shell import (
    ContextSource,
    EmptyContextSource,
    RequestPayload,
    build_payload,
)

__all__ = [
    "build_prompt",
    "build_request_body",
    "encode_request_body",
    "ContextSource",
    "EmptyContextSource",
    "RequestPayload",
    "build_payload",
]
