"""Shell context that accompanies a query.

Holds the request payload and the pluggable source of shell context
(command history, last command output, clipboard). Only the empty
source exists for now.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple


@dataclass(frozen=True)
class RequestPayload:
    """Inputs interpolated into the prompt."""
    user_query: str
    command_history: Tuple[str, ...] = ()   # oldest to newest
    last_command_output: str = ""
    user_clipboard: str = ""


class ContextSource(Protocol):
    """Supplies shell context alongside the user's query."""

    def command_history(self) -> Sequence[str]:
        ...

    def last_command_output(self) -> str:
        ...

    def clipboard(self) -> str:
        ...


class EmptyContextSource:
    """Context source that supplies nothing."""

    def command_history(self) -> Sequence[str]:
        return ()

    def last_command_output(self) -> str:
        return ""

    def clipboard(self) -> str:
        return ""


def build_payload(query: str, source: ContextSource) -> RequestPayload:
    """Assemble a fresh RequestPayload for one invocation."""
    return RequestPayload(
        user_query=query,
        command_history=tuple(source.command_history()),
        last_command_output=source.last_command_output(),
        user_clipboard=source.clipboard(),
    )
