"""
Notes List View Model.

Owns the list screen: the current ordered notes and the commands a
presentation layer drives (add, select, delete, search, favorite).
The list is always re-fetched after a mutation, never patched locally.
"""

from enum import Enum
from typing import Protocol

from notekeeper.models.note import Note
from notekeeper.repositories.note import NoteRepository
from notekeeper.viewmodels.base import ObservableViewModel

DELETE_FAILED_MESSAGE = "Failed to delete note"
FAVORITE_FAILED_MESSAGE = "Failed to update note"


class ListEvent(str, Enum):
    """Events published by NotesListViewModel."""

    LIST_CHANGED = "list_changed"  # ()
    ERROR = "error"  # (message: str)
    SHOW_DETAIL = "show_detail"  # (note: Note | None, is_creating_new: bool)


class NotesListListener(Protocol):
    """Callback surface a list screen implements."""

    def on_list_changed(self) -> None: ...

    def on_error(self, message: str) -> None: ...

    def on_show_detail(self, note: Note | None, is_creating_new: bool) -> None: ...


class NotesListViewModel(ObservableViewModel[ListEvent]):
    """
    State manager for the notes list.

    Every load notifies LIST_CHANGED, even when nothing changed.
    Commands with an out-of-range index do nothing.
    """

    def __init__(self, repository: NoteRepository) -> None:
        super().__init__()
        self._repo = repository
        self._notes: list[Note] = []
        self._query = ""

    @property
    def notes(self) -> tuple[Note, ...]:
        """Current notes in repository order."""
        return tuple(self._notes)

    @property
    def query(self) -> str:
        """Active search text, empty when showing every note."""
        return self._query

    def bind(self, listener: NotesListListener) -> None:
        """Subscribe all callbacks of a list screen at once."""
        self.subscribe(ListEvent.LIST_CHANGED, listener.on_list_changed)
        self.subscribe(ListEvent.ERROR, listener.on_error)
        self.subscribe(ListEvent.SHOW_DETAIL, listener.on_show_detail)

    def load(self) -> None:
        """Re-fetch notes (honoring the active search) and notify."""
        if self._query:
            self._set_notes(self._repo.search(self._query))
        else:
            self._set_notes(self._repo.fetch_all())

    def search(self, query: str) -> None:
        """Filter the list by title/content. Blank text clears the filter."""
        self._query = query.strip()
        self.load()

    def request_create(self) -> None:
        """Ask the presentation layer to open an empty detail screen."""
        self._emit(ListEvent.SHOW_DETAIL, None, True)

    def select(self, index: int) -> None:
        """Ask the presentation layer to open the note at index."""
        note = self._note_at(index)
        if note is None:
            return
        self._emit(ListEvent.SHOW_DETAIL, note, False)

    def delete(self, index: int) -> None:
        """Delete the note at index, then reload."""
        note = self._note_at(index)
        if note is None:
            return

        if self._repo.delete(note):
            self.load()
        else:
            self._logger.warning("Delete failed", note_id=note.id)
            self._emit(ListEvent.ERROR, DELETE_FAILED_MESSAGE)

    def toggle_favorite(self, index: int) -> None:
        """Flip the favorite flag of the note at index, then reload."""
        note = self._note_at(index)
        if note is None:
            return

        if self._repo.set_favorite(note, not note.is_favorite):
            self.load()
        else:
            self._logger.warning("Favorite toggle failed", note_id=note.id)
            self._emit(ListEvent.ERROR, FAVORITE_FAILED_MESSAGE)

    def _note_at(self, index: int) -> Note | None:
        if 0 <= index < len(self._notes):
            return self._notes[index]
        return None

    def _set_notes(self, notes: list[Note]) -> None:
        self._notes = list(notes)
        self._emit(ListEvent.LIST_CHANGED)
