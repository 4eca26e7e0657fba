"""
Navigator - Next/previous traversal over a DeckIndex.

Provides:
- Next/previous unit lookup with boundary sentinels
- Unit position as (current, total)
- First/last unit access
"""

from enum import Enum
from typing import Union

from .index import DeckIndex
from lessondeck.schemas import LessonUnit


class Boundary(str, Enum):
    """Traversal limit reached. Not an error; the value is the CLI sentinel."""
    START = "<start>"   # nothing before the first unit
    END = "<end>"       # nothing after the last unit


StartOfDeck = Boundary.START
EndOfDeck = Boundary.END


class DeckNavigator:
    """
    Stateless traversal helper over a DeckIndex snapshot.

    Every call is answered from the index alone, so one navigator can serve
    any number of callers.
    """

    def __init__(self, index: DeckIndex):
        self.index = index

    @property
    def total_units(self) -> int:
        return len(self.index)

    def next(self, current_id: str) -> Union[LessonUnit, Boundary]:
        """
        Get the unit after current_id.

        Returns:
            The following LessonUnit, or EndOfDeck if current_id is the last unit

        Raises:
            NotFoundError: If current_id is not in the deck
        """
        idx = self.index.index_of(current_id)
        if idx + 1 >= len(self.index):
            return EndOfDeck
        return self.index.at(idx + 1)

    def previous(self, current_id: str) -> Union[LessonUnit, Boundary]:
        """
        Get the unit before current_id.

        Returns:
            The preceding LessonUnit, or StartOfDeck if current_id is the first unit

        Raises:
            NotFoundError: If current_id is not in the deck
        """
        idx = self.index.index_of(current_id)
        if idx <= 0:
            return StartOfDeck
        return self.index.at(idx - 1)

    def position(self, unit_id: str) -> tuple[int, int]:
        """Get unit position as (current, total), 1-based."""
        return (self.index.index_of(unit_id) + 1, len(self.index))

    def first(self) -> LessonUnit:
        return self.index.first()

    def last(self) -> LessonUnit:
        return self.index.last()
