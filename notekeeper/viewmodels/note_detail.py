"""
Note Detail View Model.

Owns one create-or-edit session. Input is validated before the
repository is touched; the outcome is announced as SAVED or ERROR.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from notekeeper.core.exceptions import EmptyNoteError
from notekeeper.models.note import DEFAULT_CATEGORY, Note
from notekeeper.repositories.note import NoteRepository
from notekeeper.viewmodels.base import ObservableViewModel

UPDATE_FAILED_MESSAGE = "Failed to update note"


@dataclass(frozen=True)
class Creating:
    """Session that will create a new note."""


@dataclass(frozen=True)
class Editing:
    """Session bound to an existing note."""

    note: Note


DetailSession = Creating | Editing


class DetailEvent(str, Enum):
    """Events published by NoteDetailViewModel."""

    SAVED = "saved"  # ()
    ERROR = "error"  # (message: str)


class DetailState(str, Enum):
    """Where the session stands. REJECTED sessions may retry."""

    EDITING = "editing"
    SAVED = "saved"
    REJECTED = "rejected"


class NoteDetailListener(Protocol):
    """Callback surface a detail screen implements."""

    def on_saved(self) -> None: ...

    def on_error(self, message: str) -> None: ...


class NoteDetailViewModel(ObservableViewModel[DetailEvent]):
    """State manager for the note editor."""

    def __init__(self, session: DetailSession, repository: NoteRepository) -> None:
        super().__init__()
        self._session = session
        self._repo = repository
        self._state = DetailState.EDITING

    @classmethod
    def from_selection(
        cls,
        note: Note | None,
        is_creating_new: bool,
        repository: NoteRepository,
    ) -> "NoteDetailViewModel":
        """
        Build a session from a list SHOW_DETAIL payload.

        Raises:
            ValueError: If asked to edit without a note
        """
        if is_creating_new:
            return cls(Creating(), repository)
        if note is None:
            raise ValueError("An edit session requires a note")
        return cls(Editing(note), repository)

    @property
    def session(self) -> DetailSession:
        return self._session

    @property
    def is_creating_new(self) -> bool:
        return isinstance(self._session, Creating)

    @property
    def note(self) -> Note | None:
        """The note being edited, None in creation mode."""
        if isinstance(self._session, Editing):
            return self._session.note
        return None

    @property
    def title(self) -> str:
        """Initial title for the form."""
        note = self.note
        return note.title if note is not None else ""

    @property
    def content(self) -> str:
        """Initial content for the form."""
        note = self.note
        return note.content if note is not None else ""

    @property
    def state(self) -> DetailState:
        return self._state

    def bind(self, listener: NoteDetailListener) -> None:
        """Subscribe all callbacks of a detail screen at once."""
        self.subscribe(DetailEvent.SAVED, listener.on_saved)
        self.subscribe(DetailEvent.ERROR, listener.on_error)

    def save(self, title: str, content: str) -> bool:
        """
        Validate and persist the form.

        Args:
            title: Raw title input
            content: Raw content input

        Returns:
            True if SAVED was emitted
        """
        title = title.strip()
        content = content.strip()

        try:
            self._validate(title, content)
        except EmptyNoteError as e:
            self._logger.debug("Note rejected", code=e.code)
            self._reject(e.message)
            return False

        if isinstance(self._session, Editing):
            if not self._repo.update(self._session.note, title, content, None):
                self._reject(UPDATE_FAILED_MESSAGE)
                return False
        else:
            self._repo.create(title, content, DEFAULT_CATEGORY)

        self._state = DetailState.SAVED
        self._emit(DetailEvent.SAVED)
        return True

    @staticmethod
    def _validate(title: str, content: str) -> None:
        if not title and not content:
            raise EmptyNoteError()

    def _reject(self, message: str) -> None:
        self._state = DetailState.REJECTED
        self._emit(DetailEvent.ERROR, message)
