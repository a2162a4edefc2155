"""
Note Schemas.

Pydantic read models the presentation layer renders from.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteSummary(BaseModel):
    """Read-only snapshot of a note for display."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    category: str = Field(description="Category label")
    is_favorite: bool = Field(description="Whether the note is a favorite")
    color_hex: str = Field(description="Display color tag")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def display_title(self) -> str:
        """Title, or the first content line when the title is blank."""
        if self.title:
            return self.title
        first_line = self.content.splitlines()[0] if self.content else ""
        return first_line[:40] or "Untitled"

    @property
    def preview(self) -> str:
        """Single-line content preview."""
        flat = " ".join(self.content.split())
        return flat if len(flat) <= 60 else flat[:57] + "..."
