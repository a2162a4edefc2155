"""
Note Repository.

Data access layer for notes. The only component allowed to reach the
durable store. Store failures never leave this module: reads degrade to
an empty list, writes report a boolean.
"""

import random
from collections.abc import Callable
from datetime import datetime
from uuid import uuid4

from sqlalchemy import String, func, or_

from notekeeper.core.exceptions import PersistenceError
from notekeeper.core.logging import get_logger
from notekeeper.core.store import DurableStore
from notekeeper.core.utils import utc_now
from notekeeper.models.note import DEFAULT_CATEGORY, NOTE_COLOR_PALETTE, Note

logger = get_logger(__name__)

# Newest activity first; creation time breaks ties on coarse clocks.
LISTING_ORDER = (Note.updated_at.desc(), Note.created_at.desc())


class NoteRepository:
    """
    Repository for Note model.

    Every mutation is committed before the method returns, so callers can
    re-query immediately.

    Usage:
        repo = NoteRepository(store)
        note = repo.create("Shopping", "Milk, eggs")
        repo.update(note, "Shopping List", "Milk, eggs, bread")
        repo.delete(note)
    """

    def __init__(
        self,
        store: DurableStore,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize the repository.

        Args:
            store: Durable store holding the authoritative notes
            rng: Random source for color assignment
            clock: Source of "now" for timestamps
        """
        self._store = store
        self._rng = rng or random.Random()
        self._clock = clock

    def fetch_all(self) -> list[Note]:
        """
        Get every note, most recently updated first.

        Returns:
            Ordered notes, or an empty list if the store cannot be read
        """
        try:
            return self._store.query(Note, order_by=LISTING_ORDER)
        except PersistenceError as e:
            logger.warning("Fetching notes failed, returning empty list", error=e.message)
            return []

    def search(self, query: str) -> list[Note]:
        """
        Search notes by title or content (case-insensitive substring).

        Surrounding whitespace is ignored. Case folding covers all of
        Unicode, and %, _ match literally.

        Args:
            query: Search text. Blank text matches every note.

        Returns:
            Matching notes, most recently updated first, or an empty list
            if the store cannot be read
        """
        term = query.strip().casefold()
        if not term:
            return self.fetch_all()

        try:
            return self._store.query(
                Note,
                or_(
                    func.casefold(Note.title, type_=String).contains(term, autoescape=True),
                    func.casefold(Note.content, type_=String).contains(term, autoescape=True),
                ),
                order_by=LISTING_ORDER,
            )
        except PersistenceError as e:
            logger.warning("Searching notes failed, returning empty list", query=query, error=e.message)
            return []

    def create(self, title: str, content: str, category: str = DEFAULT_CATEGORY) -> Note:
        """
        Create and persist a new note.

        Title and content are trimmed. The note gets a fresh id, matching
        created/updated timestamps, is_favorite=False and a palette color.

        Args:
            title: Note title
            content: Note body
            category: Category label

        Returns:
            The new note
        """
        now = self._clock()
        note = Note(
            id=str(uuid4()),
            title=title.strip(),
            content=content.strip(),
            category=category,
            created_at=now,
            updated_at=now,
            is_favorite=False,
            color_hex=self.pick_color(),
        )
        self._store.insert(note)

        if self._store.flush():
            logger.info("Note created", note_id=note.id, category=category)
        else:
            logger.error("Note could not be persisted", title=note.title)
        return note

    def update(
        self,
        note: Note,
        title: str,
        content: str,
        category: str | None = None,
    ) -> bool:
        """
        Update a note's text and optionally its category.

        Args:
            note: Note to update
            title: New title (trimmed)
            content: New content (trimmed)
            category: New category; None leaves it unchanged

        Returns:
            True if the change was committed
        """
        if not self._is_stored(note):
            logger.warning("Update skipped, note no longer stored", note_id=note.id)
            return False

        note.title = title.strip()
        note.content = content.strip()
        if category is not None:
            note.category = category
        note.updated_at = self._clock()

        committed = self._store.flush()
        if committed:
            logger.info("Note updated", note_id=note.id)
        return committed

    def set_favorite(self, note: Note, is_favorite: bool) -> bool:
        """
        Mark or unmark a note as favorite.

        Does not refresh updated_at, so listing order is unaffected.

        Returns:
            True if the change was committed
        """
        if not self._is_stored(note):
            logger.warning("Favorite skipped, note no longer stored", note_id=note.id)
            return False

        note.is_favorite = is_favorite
        committed = self._store.flush()
        if committed:
            logger.info("Note favorite changed", note_id=note.id, is_favorite=is_favorite)
        return committed

    def delete(self, note: Note) -> bool:
        """
        Delete a note.

        Returns:
            True if the removal was committed
        """
        if not self._is_stored(note) or not self._store.delete(note):
            logger.warning("Delete skipped, note no longer stored", note_id=note.id)
            return False

        committed = self._store.flush()
        if committed:
            logger.info("Note deleted", note_id=note.id)
        return committed

    def persist(self) -> bool:
        """Commit anything pending. Hosts call this before suspending."""
        return self._store.flush()

    def pick_color(self) -> str:
        """Choose a display color uniformly from the palette."""
        return self._rng.choice(NOTE_COLOR_PALETTE)

    def _is_stored(self, note: Note) -> bool:
        """Whether the note still exists in the store."""
        if not self._store.contains(note):
            return False
        try:
            return self._store.get(Note, note.id) is not None
        except PersistenceError:
            return False
