"""
CLI Client.

Command-line front end for the notes core.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    notekeeper --help                               # Show help
    notekeeper list                                 # List notes, newest first
    notekeeper search work                          # Filter by title/content
    notekeeper add -t "Shopping" -c "Milk, eggs"    # Create a note
    notekeeper edit 1 -t "Shopping List"            # Edit note #1
    notekeeper delete 2                             # Delete note #2
    notekeeper favorite 1                           # Toggle favorite on note #1
    notekeeper shell                                # Start interactive shell
    notekeeper version                              # Show name and version

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from notekeeper.cli.screens import open_workspace
from notekeeper.core.config import get_app_config, validate_project_root
from notekeeper.core.logging import get_logger, log_with_source, setup_logging

app = typer.Typer(
    name="notekeeper",
    help="Notekeeper CLI - list, search, create, edit and delete notes.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger(__name__)


@app.command("list")
def list_notes() -> None:
    """
    List all notes, most recently updated first.
    """
    with open_workspace(console) as workspace:
        workspace.show()


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to find in titles or content"),
) -> None:
    """
    Search notes by title or content (case-insensitive).
    """
    with open_workspace(console) as workspace:
        workspace.show(query)


@app.command()
def add(
    title: str = typer.Option("", "--title", "-t", help="Note title"),
    content: str = typer.Option("", "--content", "-c", help="Note content"),
) -> None:
    """
    Create a new note. Needs a title or content.
    """
    log_with_source(logger, "cli", "debug", "Add command", title=title)
    with open_workspace(console) as workspace:
        if not workspace.add(title, content):
            raise typer.Exit(1)


@app.command()
def edit(
    position: int = typer.Argument(..., help="Note number as shown by 'list'"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
) -> None:
    """
    Edit a note's title and/or content.
    """
    with open_workspace(console) as workspace:
        if not workspace.has_position(position) or not workspace.edit(position, title, content):
            raise typer.Exit(1)


@app.command()
def delete(
    position: int = typer.Argument(..., help="Note number as shown by 'list'"),
) -> None:
    """
    Delete a note.
    """
    with open_workspace(console) as workspace:
        if not workspace.has_position(position) or not workspace.delete(position):
            raise typer.Exit(1)
        console.print("[green]Note deleted.[/green]")


@app.command()
def favorite(
    position: int = typer.Argument(..., help="Note number as shown by 'list'"),
) -> None:
    """
    Toggle the favorite flag of a note.
    """
    with open_workspace(console) as workspace:
        if not workspace.has_position(position) or not workspace.toggle_favorite(position):
            raise typer.Exit(1)
        workspace.show()


@app.command()
def version() -> None:
    """
    Show application name and version.
    """
    application = get_app_config().application
    console.print(Panel(
        f"[bold]{application.name}[/bold]\n"
        f"Version: {application.version}\n"
        f"{application.description}",
        title="Application Info",
    ))


@app.command()
def shell() -> None:
    """
    Start interactive shell mode.

    Keeps one store open and re-renders after every command.
    """
    from notekeeper.cli.shell import run_shell

    run_shell()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Notekeeper CLI.

    Local notes kept in SQLite, listed newest first.
    """
    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
