"""
Repositories.

Data access layer. Nothing outside this package touches the durable store.
"""

from notekeeper.repositories.note import NoteRepository

__all__ = ["NoteRepository"]
