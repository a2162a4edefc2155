"""
Database Models.

SQLAlchemy declarative models persisted by the durable store.
"""

from notekeeper.models.base import Base
from notekeeper.models.note import Note

__all__ = ["Base", "Note"]
