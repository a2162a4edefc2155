"""
View Models.

State managers that sit between a presentation layer and the note
repository. Each one holds UI-facing state, exposes commands, and
notifies subscribed listeners synchronously.

Usage:
    from notekeeper.viewmodels import ListEvent, NotesListViewModel

    vm = NotesListViewModel(repository)
    vm.subscribe(ListEvent.LIST_CHANGED, redraw)
    vm.load()
"""

from notekeeper.viewmodels.note_detail import (
    Creating,
    DetailEvent,
    DetailState,
    Editing,
    NoteDetailViewModel,
)
from notekeeper.viewmodels.notes_list import ListEvent, NotesListViewModel

__all__ = [
    "Creating",
    "DetailEvent",
    "DetailState",
    "Editing",
    "ListEvent",
    "NoteDetailViewModel",
    "NotesListViewModel",
]
