"""Persisted CLI configuration.

Hides where the API key is stored and how it is serialized: a pretty JSON
object ``{"api_key": "..."}`` in the per-user application directory.
"""

from pathlib import Path

import typer
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console

from ..errors import ConfigError

APP_NAME = "gemini-chat-tui"
CONFIG_FILENAME = "config.json"
API_KEY_URL = "https://aistudio.google.com/app/apikey"


def get_config_path() -> Path:
    """Location of the config file in the per-user config directory."""
    return Path(typer.get_app_dir(APP_NAME)) / CONFIG_FILENAME


class Config(BaseModel):
    """Stored settings."""

    api_key: str = Field(default="", description="Gemini API key")

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load the config, creating an empty one on first run.

        Raises:
            ConfigError: The file exists but cannot be read or parsed
        """
        config_path = path or get_config_path()

        if not config_path.exists():
            config = cls()
            config.save(config_path)
            return config

        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read config file: {config_path}: {e}") from e

        try:
            return cls.model_validate_json(content)
        except ValidationError as e:
            raise ConfigError(f"Failed to parse config file: {config_path}") from e

    def save(self, path: Path | None = None) -> None:
        """Write the config, creating its directory if needed.

        Raises:
            ConfigError: The directory or file cannot be written
        """
        config_path = path or get_config_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to write config file: {config_path}: {e}") from e

    def set_api_key(self, api_key: str, path: Path | None = None) -> None:
        """Store a new API key and save.

        Raises:
            ConfigError: The key is blank or cannot be saved
        """
        api_key = api_key.strip()
        if not api_key:
            raise ConfigError("API key cannot be empty")
        self.api_key = api_key
        self.save(path)


def prompt_for_api_key(console: Console) -> str:
    """Ask the user for an API key on the terminal.

    Raises:
        ConfigError: The user entered nothing
    """
    console.print("[bold]🚀 Welcome to Gemini Chat TUI![/bold]")
    console.print()
    console.print("To get started, you need a Gemini API key:")
    console.print(f"1. Go to [link={API_KEY_URL}]{API_KEY_URL}[/link]")
    console.print("2. Create a new API key")
    console.print("3. Paste it below")
    console.print()

    api_key = console.input("Enter your Gemini API key: ").strip()
    if not api_key:
        raise ConfigError("API key cannot be empty")

    console.print("[green]✅ API key saved! Starting the chat...[/green]")
    console.print()
    return api_key
