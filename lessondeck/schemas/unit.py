"""
Lesson unit schemas for lessondeck.

Defines Pydantic models for:
- Raw source descriptors (what a loader produces)
- Lesson units (what a deck holds)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class SourceDescriptor(BaseModel):
    """One raw lesson source: a name and its text, plus optional metadata."""
    model_config = ConfigDict(frozen=True)

    name: str
    text: str
    origin: Optional[str] = None    # file path or other location, for diagnostics
    language: Optional[str] = None  # code language hint, e.g. "swift"
    title: Optional[str] = None     # explicit title (manifest only)
    order: Optional[int] = Field(default=None, ge=0)  # explicit order (manifest only)

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Source name must not be blank')
        return v


class LessonUnit(BaseModel):
    """
    One lesson in a deck.

    The body is opaque: it is carried and rendered, never parsed or executed.
    Units are immutable once the deck that owns them is built.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    title: str
    order: Optional[int] = None     # leading number of the name; None if unnumbered
    position: int = Field(..., ge=1)  # 1-based deck position
    body: str
    language: Optional[str] = None
    origin: Optional[str] = None

    @property
    def is_numbered(self) -> bool:
        return self.order is not None
