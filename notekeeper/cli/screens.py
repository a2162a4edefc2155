"""
Screens.

Rich renderers bound to the view models, plus the Workspace that wires
store, repository and view models together for one CLI session.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from notekeeper.core.database import create_store, engine_from_config
from notekeeper.core.store import DurableStore
from notekeeper.models.note import Note
from notekeeper.repositories.note import NoteRepository
from notekeeper.schemas.note import NoteSummary
from notekeeper.viewmodels import NoteDetailViewModel, NotesListViewModel


class ListScreen:
    """Renders the notes list and remembers the last detail request."""

    def __init__(self, view_model: NotesListViewModel, console: Console) -> None:
        self.view_model = view_model
        self.console = console
        self.render_on_change = False
        self.pending_detail: tuple[Note | None, bool] | None = None
        self.errors: list[str] = []
        view_model.bind(self)

    def on_list_changed(self) -> None:
        if self.render_on_change:
            self.render()

    def on_error(self, message: str) -> None:
        self.errors.append(message)
        self.console.print(f"[red]{message}[/red]")

    def on_show_detail(self, note: Note | None, is_creating_new: bool) -> None:
        self.pending_detail = (note, is_creating_new)

    def take_detail(self) -> tuple[Note | None, bool] | None:
        """Pop the last SHOW_DETAIL payload, if any."""
        pending, self.pending_detail = self.pending_detail, None
        return pending

    def render(self) -> None:
        """Print the current notes as a table."""
        notes = [NoteSummary.model_validate(note) for note in self.view_model.notes]
        if not notes:
            message = "No notes match your search." if self.view_model.query else "No notes yet."
            self.console.print(f"[dim]{message}[/dim]")
            return

        title = f"Notes matching '{escape(self.view_model.query)}'" if self.view_model.query else "Notes"
        table = Table(title=title, show_header=True)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("★")
        table.add_column("Title", style="bold")
        table.add_column("Preview")
        table.add_column("Category")
        table.add_column("Updated", style="dim")

        for position, note in enumerate(notes, start=1):
            table.add_row(
                str(position),
                "★" if note.is_favorite else "",
                f"[{note.color_hex}]●[/] {escape(note.display_title)}",
                escape(note.preview),
                escape(note.category),
                note.updated_at.strftime("%Y-%m-%d %H:%M"),
            )
        self.console.print(table)


class DetailScreen:
    """Reports the outcome of a detail session."""

    def __init__(self, view_model: NoteDetailViewModel, console: Console) -> None:
        self.console = console
        self.saved = False
        view_model.bind(self)

    def on_saved(self) -> None:
        self.saved = True
        self.console.print("[green]Note saved.[/green]")

    def on_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")


class Workspace:
    """
    One session's object graph: store → repository → view models → screens.

    Commands use 1-based positions as shown in the rendered table.
    """

    def __init__(self, store: DurableStore, console: Console) -> None:
        self.store = store
        self.console = console
        self.repository = NoteRepository(store)
        self.notes = NotesListViewModel(self.repository)
        self.list_screen = ListScreen(self.notes, console)

    def show(self, query: str | None = None) -> None:
        """Load (optionally filtered) notes and render them."""
        self.list_screen.render_on_change = True
        try:
            if query is None:
                self.notes.load()
            else:
                self.notes.search(query)
        finally:
            self.list_screen.render_on_change = False

    def refresh(self) -> None:
        """Reload notes without rendering."""
        self.notes.load()

    def has_position(self, position: int) -> bool:
        if 1 <= position <= len(self.notes.notes):
            return True
        self.console.print(f"[yellow]No note at position {position}.[/yellow]")
        return False

    def add(self, title: str, content: str) -> bool:
        """Open a creation session and save it."""
        self.notes.request_create()
        return self._save_pending(title, content)

    def edit(self, position: int, title: str | None, content: str | None) -> bool:
        """Open the note at position and save new values (None keeps the old one)."""
        self.notes.select(position - 1)
        return self._save_pending(title, content)

    def delete(self, position: int) -> bool:
        errors_before = len(self.list_screen.errors)
        self.notes.delete(position - 1)
        return len(self.list_screen.errors) == errors_before

    def toggle_favorite(self, position: int) -> bool:
        errors_before = len(self.list_screen.errors)
        self.notes.toggle_favorite(position - 1)
        return len(self.list_screen.errors) == errors_before

    def _save_pending(self, title: str | None, content: str | None) -> bool:
        pending = self.list_screen.take_detail()
        if pending is None:
            return False

        note, is_creating_new = pending
        detail = NoteDetailViewModel.from_selection(note, is_creating_new, self.repository)
        screen = DetailScreen(detail, self.console)
        detail.save(
            title if title is not None else detail.title,
            content if content is not None else detail.content,
        )
        if screen.saved:
            self.refresh()
        return screen.saved

    def close(self) -> None:
        """Persist anything pending and release the database."""
        self.store.close()
        self.store.engine.dispose()


@contextmanager
def open_workspace(console: Console) -> Iterator[Workspace]:
    """Open a workspace on the configured store and close it afterwards."""
    workspace = Workspace(create_store(engine_from_config()), console)
    try:
        workspace.refresh()
        yield workspace
    finally:
        workspace.close()
