"""Abstract agent interface for command generation."""

from abc import ABC, abstractmethod

from terminal_ai.context.sources.shell import RequestPayload


class Agent(ABC):
    """
    Abstract base class for LLM-based command generation agents.

    Each provider implements this interface so the suggestion generator
    does not depend on a particular API.
    """

    @abstractmethod
    def generate_command(self, payload: RequestPayload) -> str:
        """
        Generate a single shell command for the payload's query.

        Args:
            payload: User query plus shell context

        Returns:
            Shell command string with surrounding whitespace removed

        Raises:
            TerminalAIError: On any failure (credential, network, API, decoding)
        """
        pass
