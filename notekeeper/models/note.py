"""
Note Model.

Database model for notes, the only domain entity.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.models.base import Base, TimestampMixin, UUIDMixin

DEFAULT_CATEGORY = "General"

NOTE_COLOR_PALETTE: tuple[str, ...] = (
    "#4ECDC4",
    "#556270",
    "#C7F464",
    "#FF6B6B",
    "#C44D58",
    "#45B7AA",
    "#96CEB4",
    "#FFEEAD",
    "#D4A5A5",
)


class Note(UUIDMixin, TimestampMixin, Base):
    """
    Note database model.

    A user-authored title/content pair with display metadata.
    id, created_at and color_hex are fixed at creation.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    category: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        default=DEFAULT_CATEGORY,
    )
    is_favorite: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )
    color_hex: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
        default=NOTE_COLOR_PALETTE[0],
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
