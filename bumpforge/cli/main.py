"""bumpforge CLI - Main application entry point.

Registers the commands and wraps them with user-friendly error handling.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

import typer
from rich.console import Console

from bumpforge import __version__
from bumpforge.cli.bump import bump_command
from bumpforge.core.exceptions import BumpForgeError, get_error_info

err_console = Console(stderr=True)


def _handle_cli_error(e: Exception, operation_name: str, show_debug: bool) -> None:
    """
    Print an error with its code, cause and fix suggestions.

    Args:
        e: The exception that occurred
        operation_name: Human-readable operation name
        show_debug: Whether to show the traceback
    """
    info = get_error_info(e)

    err_console.print(
        f"[red]✗ Error during {operation_name}[/red] [dim]({info['error_code']})[/dim]"
    )
    message = e.user_message if isinstance(e, BumpForgeError) else str(e)
    err_console.print(f"  {message}", markup=False)
    err_console.print(f"  [yellow]Why:[/yellow] {info['why_it_happened']}")
    for fix in info["how_to_fix"]:
        err_console.print(f"  • {fix}", markup=False)

    if show_debug:
        err_console.print_exception()
    elif not isinstance(e, BumpForgeError):
        err_console.print("  Run with --debug for more information")

    logger = logging.getLogger(__name__)
    logger.debug(f"[{operation_name}] {type(e).__name__}: {e}", exc_info=True)


def safe_cli_command(
    operation_name: str,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to wrap CLI commands with user-friendly error handling.

    Args:
        operation_name: Human-readable operation name for error context

    Returns:
        Decorator function that wraps the command with error handling
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except (typer.Exit, typer.Abort):
                raise
            except Exception as e:
                show_debug = kwargs.get("debug", False)
                _handle_cli_error(e, operation_name, show_debug)
                raise typer.Exit(code=1)

        return wrapper

    return decorator


app = typer.Typer(
    name="bumpforge",
    help="Bump the semantic version of JSON manifests",
    add_completion=False,
    no_args_is_help=True,
)


@app.command("version")
def version_command() -> None:
    """Show the bumpforge version."""
    typer.echo(f"bumpforge {__version__}")


app.command("bump")(safe_cli_command("version bump")(bump_command))


def cli_main() -> None:
    """Console script entry point."""
    app()
