"""Gemini agent calling the generateContent REST endpoint directly."""

import logging
from typing import Any, Optional

import httpx

from terminal_ai.context.prompt import encode_request_body
from terminal_ai.context.sources.shell import RequestPayload
from terminal_ai.core.agent import Agent
from terminal_ai.core.configs import AdapterConfig
from terminal_ai.core.errors import (
    DecodeError,
    EmptyResponse,
    MissingCredential,
    NetworkError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class GeminiAgent(Agent):
    """
    Agent implementation using a single generateContent POST.

    One request per call, bounded by the configured timeout. Failures are
    raised as TerminalAIError subclasses and never retried.
    """

    def __init__(self, config: AdapterConfig, client: Optional[httpx.Client] = None):
        """
        Initialize Gemini agent.

        Args:
            config: Adapter configuration (key, model, endpoint, timeout)
            client: Pre-built httpx client; used as-is and not closed here
        """
        self.config = config
        self.client = client

    def build_url(self) -> str:
        return (
            f"{self.config.endpoint}/models/{self.config.model}:generateContent"
            f"?key={self.config.api_key}"
        )

    def generate_command(self, payload: RequestPayload) -> str:
        return self.call(payload)

    def call(self, payload: RequestPayload) -> str:
        """
        Send the payload and return the suggested command.

        Flow:
        1. Require an API key
        2. POST the JSON body with the configured timeout
        3. Reject non-200 responses
        4. Decode candidates[0].content.parts[0].text and strip it
        """
        if not self.config.api_key:
            raise MissingCredential()

        body = encode_request_body(payload)
        logger.debug("calling Gemini with %d s timeout", self.config.timeout)

        response = self._post(body)

        if response.status_code != 200:
            raise UpstreamError(response.status_code, response.text)

        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            raise DecodeError("failed to parse API response", original_error=e) from e

        return extract_command(data)

    def _post(self, body: bytes) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        try:
            if self.client is not None:
                return self.client.post(
                    self.build_url(),
                    content=body,
                    headers=headers,
                    timeout=self.config.timeout,
                )
            with httpx.Client(timeout=self.config.timeout) as client:
                return client.post(self.build_url(), content=body, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError("failed to call Gemini API", original_error=e) from e


def _expect(value: Any, kind: type, name: str) -> Any:
    if not isinstance(value, kind):
        raise DecodeError(f"failed to parse API response: '{name}' is not a {kind.__name__}")
    return value


def extract_command(data: Any) -> str:
    """
    Pull the command text out of a generateContent response.

    Structure: candidates[0].content.parts[0].text

    Missing keys count as empty; keys of the wrong type are a DecodeError.
    """
    data = _expect(data, dict, "response")

    candidates = _expect(data.get("candidates") or [], list, "candidates")
    if not candidates:
        raise EmptyResponse()

    candidate = _expect(candidates[0], dict, "candidate")
    content = _expect(candidate.get("content") or {}, dict, "content")
    parts = _expect(content.get("parts") or [], list, "parts")
    if not parts:
        raise EmptyResponse()

    part = _expect(parts[0], dict, "part")
    text = _expect(part.get("text") or "", str, "text")

    return text.strip()
