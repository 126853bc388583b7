"""Command-line entry point: resolve the API key, then run the chat TUI."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..errors import ConfigError
from .providers import get_api_key, get_transport

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="gemchat",
    help="A terminal chat client for Google's Gemini",
    add_completion=True,
)

# Console for rich output
console = Console()


def _run_tui(transport=None, demo: bool = False, log_level: str | None = None) -> None:
    """Run the TUI; terminal start-up failures exit with code 1."""
    from ..ui import run_textual_tui

    try:
        asyncio.run(run_textual_tui(transport=transport, demo=demo, log_level=log_level))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def chat(
    api_key: str | None = typer.Option(
        None,
        "--api-key",
        help="Set the API key (will be saved for future use)"
    ),
    reset_config: bool = typer.Option(
        False,
        "--reset-config",
        help="Reset configuration (will prompt for API key again)"
    ),
    demo: bool = typer.Option(
        False,
        "--demo",
        help="Run in demo mode (shows UI without API key)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Gemini model to use (default: $GEMINI_MODEL or gemini-2.0-flash)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Chat with Gemini in an interactive terminal UI."""
    if demo:
        console.print("[dim]Running in demo mode - showing UI with sample messages[/dim]")
        console.print("[dim]Press any key to exit demo mode[/dim]")
        _run_tui(demo=True, log_level=log_level)
        return

    try:
        key = get_api_key(api_key=api_key, reset_config=reset_config, console=console)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    _run_tui(transport=get_transport(key, model), log_level=log_level)
    console.print("\n[dim]Goodbye![/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
