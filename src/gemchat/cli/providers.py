"""Provider factory functions for CLI.

Centralizes resolution of the API key and creation of the transport.
Hides configuration details from the command implementation.
"""

import os
from pathlib import Path

from rich.console import Console

from ..errors import ConfigError
from ..transport import DEFAULT_MODEL, ChatTransport, create_transport
from .config import Config, prompt_for_api_key

# Default console for output
_console = Console()


def get_api_key(
    api_key: str | None = None,
    reset_config: bool = False,
    console: Console | None = None,
    config_path: Path | None = None,
) -> str:
    """Resolve the API key to use for this session.

    Order: ``--api-key`` (saved), stored config, ``GEMINI_API_KEY``
    (not saved), interactive prompt (saved). ``reset_config`` skips the
    stored key and the environment so the user is always asked.

    Args:
        api_key: Key passed on the command line
        reset_config: Ignore the stored key
        console: Optional Rich console for output
        config_path: Override the config file location

    Returns:
        A non-empty API key

    Raises:
        ConfigError: The key is empty or the config cannot be saved

    Environment variables:
        GEMINI_API_KEY: Gemini API key used when none is stored
    """
    con = console or _console

    if reset_config:
        config = Config()
    else:
        try:
            config = Config.load(config_path)
        except ConfigError as e:
            con.print(f"[yellow]Warning: {e}. Starting with an empty config.[/yellow]")
            config = Config()

    if api_key is not None:
        config.set_api_key(api_key, config_path)
    elif not config.api_key:
        env_key = os.getenv("GEMINI_API_KEY", "").strip()
        if env_key and not reset_config:
            return env_key
        config.set_api_key(prompt_for_api_key(con), config_path)

    if not config.api_key:
        raise ConfigError("API key cannot be empty")
    return config.api_key


def get_transport(api_key: str, model: str | None = None) -> ChatTransport:
    """Create the Gemini transport.

    Environment variables:
        GEMINI_MODEL: Gemini model (default: gemini-2.0-flash)
    """
    model = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    return create_transport("gemini", api_key=api_key, model=model)
