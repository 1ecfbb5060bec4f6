"""
Suggestion generation with identity fallback.

A terminal integration must always get a command back, so every failure
on the network path degrades to echoing the user's query.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from terminal_ai.context.sources.shell import ContextSource, EmptyContextSource, build_payload
from terminal_ai.core.agent import Agent
from terminal_ai.core.configs import AdapterConfig
from terminal_ai.core.errors import TerminalAIError

logger = logging.getLogger(__name__)

OFFLINE_REASON = "offline"


@dataclass(frozen=True)
class Suggestion:
    """The command handed back to the shell."""
    command: str


@dataclass(frozen=True)
class Suggested:
    """The agent produced a command."""
    command: str

    @property
    def suggestion(self) -> Suggestion:
        return Suggestion(command=self.command)


@dataclass(frozen=True)
class Fallback:
    """No command was generated; the original input is echoed back."""
    original_input: str
    reason: str

    @property
    def suggestion(self) -> Suggestion:
        return Suggestion(command=self.original_input)


SuggestionResult = Union[Suggested, Fallback]


def generate_suggestion(
    query: str,
    config: AdapterConfig,
    agent: Optional[Agent] = None,
    context_source: Optional[ContextSource] = None,
) -> SuggestionResult:
    """
    Turn a query into a suggestion result. Never raises TerminalAIError.

    Args:
        query: The user's natural-language request
        config: Adapter configuration
        agent: Command generator (GeminiAgent built from config if None)
        context_source: Shell context provider (empty if None)

    Returns:
        Suggested(command) on success, Fallback(query, reason) otherwise
    """
    if config.offline:
        logger.debug("offline mode enabled, echoing input")
        return Fallback(original_input=query, reason=OFFLINE_REASON)

    payload = build_payload(query, context_source or EmptyContextSource())

    if agent is None:
        from terminal_ai.providers.gemini import GeminiAgent
        agent = GeminiAgent(config)

    try:
        command = agent.generate_command(payload)
    except TerminalAIError as e:
        logger.error("Error: %s", e)
        return Fallback(original_input=query, reason=str(e))

    return Suggested(command=command)


def suggest(
    query: str,
    config: AdapterConfig,
    agent: Optional[Agent] = None,
    context_source: Optional[ContextSource] = None,
) -> Suggestion:
    """Shortcut returning only the Suggestion."""
    return generate_suggestion(query, config, agent, context_source).suggestion
