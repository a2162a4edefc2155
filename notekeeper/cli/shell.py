"""
Interactive Shell Mode.

REPL over a single workspace. Uses Rich for output and shlex for parsing.
"""

import shlex
from collections.abc import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from notekeeper.cli.screens import Workspace, open_workspace
from notekeeper.core.logging import get_logger, log_with_source

console = Console()
logger = get_logger(__name__)


class InteractiveShell:
    """
    Interactive shell for note commands.

    Usage:
        with open_workspace(console) as workspace:
            InteractiveShell(workspace).run()
    """

    def __init__(self, workspace: Workspace, console: Console = console) -> None:
        self.workspace = workspace
        self.console = console
        self.running = False
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "help": self._cmd_help,
            "list": self._cmd_list,
            "search": self._cmd_search,
            "add": self._cmd_add,
            "edit": self._cmd_edit,
            "delete": self._cmd_delete,
            "fav": self._cmd_favorite,
            "clear": self._cmd_clear,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
        }

    def run(self) -> None:
        """Run the interactive shell."""
        self.running = True

        self.console.print(Panel(
            "[bold]Notekeeper Shell[/bold]\n"
            "Type [cyan]help[/cyan] for available commands, [cyan]quit[/cyan] to exit.",
            title="Welcome",
        ))
        self.workspace.show()

        while self.running:
            try:
                user_input = self.console.input("[bold cyan]>[/bold cyan] ").strip()
            except KeyboardInterrupt:
                self.console.print("\n[dim]Use 'quit' to exit[/dim]")
                continue
            except EOFError:
                break

            if user_input:
                self.execute(user_input)

        self.console.print("[dim]Goodbye![/dim]")

    def execute(self, line: str) -> None:
        """Parse and run one command line."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Could not parse input: {e}[/red]")
            return

        command, args = parts[0].lower(), parts[1:]
        handler = self.commands.get(command)
        if handler is None:
            self.console.print(f"[red]Unknown command: {command}[/red]")
            self.console.print("Type [cyan]help[/cyan] for available commands.")
            return

        log_with_source(logger, "shell", "debug", "Command executed", command=command)
        handler(args)

    def _position(self, args: list[str]) -> int | None:
        if not args or not args[0].isdigit():
            self.console.print("[red]Expected a note number.[/red]")
            return None
        position = int(args[0])
        return position if self.workspace.has_position(position) else None

    def _cmd_help(self, args: list[str]) -> None:
        """Display help information."""
        table = Table(title="Available Commands", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description")

        table.add_row("list", "Show all notes")
        table.add_row("search <text>", "Filter notes (empty text clears)")
        table.add_row("add <title> [content]", "Create a note")
        table.add_row("edit <n> <title> [content]", "Replace a note's text")
        table.add_row("delete <n>", "Delete note n")
        table.add_row("fav <n>", "Toggle favorite on note n")
        table.add_row("clear", "Clear the screen")
        table.add_row("quit / exit", "Exit the shell")

        self.console.print(table)

    def _cmd_list(self, args: list[str]) -> None:
        self.workspace.show("")

    def _cmd_search(self, args: list[str]) -> None:
        self.workspace.show(" ".join(args))

    def _cmd_add(self, args: list[str]) -> None:
        title = args[0] if args else ""
        content = " ".join(args[1:])
        if self.workspace.add(title, content):
            self.workspace.show()

    def _cmd_edit(self, args: list[str]) -> None:
        position = self._position(args)
        if position is None:
            return
        title = args[1] if len(args) > 1 else None
        content = " ".join(args[2:]) if len(args) > 2 else None
        if self.workspace.edit(position, title, content):
            self.workspace.show()

    def _cmd_delete(self, args: list[str]) -> None:
        position = self._position(args)
        if position is not None and self.workspace.delete(position):
            self.workspace.show()

    def _cmd_favorite(self, args: list[str]) -> None:
        position = self._position(args)
        if position is not None and self.workspace.toggle_favorite(position):
            self.workspace.show()

    def _cmd_clear(self, args: list[str]) -> None:
        self.console.clear()

    def _cmd_quit(self, args: list[str]) -> None:
        self.running = False


def run_shell() -> None:
    """Run the interactive shell on the configured store."""
    with open_workspace(console) as workspace:
        InteractiveShell(workspace).run()
