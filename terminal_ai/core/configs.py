"""Configuration for terminal-ai.

Settings are read once at process start from the environment, layered
over an optional dotenv file, and passed explicitly to the generator.
"""

from dataclasses import dataclass
import os
import re
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

# Optional user settings file; the process environment always wins.
ENV_FILE_PATH = Path.home() / ".config" / "terminal-ai" / ".env"

DEFAULT_TIMEOUT = 5
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class AdapterConfig:
    api_key: str = ""
    timeout: int = DEFAULT_TIMEOUT
    debug: bool = False
    offline: bool = False
    json_output: bool = False
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT


def _get_bool(raw: Mapping[str, Optional[str]], key: str, default: bool = False) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_timeout(value: Optional[str], default: int = DEFAULT_TIMEOUT) -> int:
    """
    Parse a timeout override in whole seconds.

    Only plain ASCII decimal integers are accepted; anything else, or a
    value that is not positive, falls back to the default.
    """
    if value is None or not _INTEGER_RE.fullmatch(str(value)):
        return default
    seconds = int(str(value))
    return seconds if seconds > 0 else default


def load_raw_config(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = None,
) -> dict:
    """
    Merge dotenv file values with the environment.

    Args:
        environ: Environment mapping (defaults to os.environ)
        env_file: Dotenv file path; TERMINAL_AI_ENV_FILE or ENV_FILE_PATH if None

    Returns:
        Dict of raw string values, environment taking precedence
    """
    environ = os.environ if environ is None else environ

    if env_file is None:
        override = environ.get("TERMINAL_AI_ENV_FILE", "").strip()
        env_file = Path(override).expanduser() if override else ENV_FILE_PATH

    data: dict = {}
    if env_file.exists():
        data.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    data.update(environ)
    return data


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = None,
) -> AdapterConfig:
    """Build an AdapterConfig from the environment and optional dotenv file."""
    raw = load_raw_config(environ, env_file)

    return AdapterConfig(
        api_key=(raw.get("GEMINI_API_KEY") or "").strip(),
        timeout=parse_timeout(raw.get("TERMINAL_AI_TIMEOUT")),
        debug=_get_bool(raw, "TERMINAL_AI_DEBUG"),
        offline=_get_bool(raw, "TERMINAL_AI_OFFLINE"),
        json_output=_get_bool(raw, "TERMINAL_AI_JSON"),
        model=(raw.get("TERMINAL_AI_MODEL") or "").strip() or DEFAULT_MODEL,
        endpoint=(raw.get("TERMINAL_AI_ENDPOINT") or "").strip().rstrip("/") or DEFAULT_ENDPOINT,
    )
