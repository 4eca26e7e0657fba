"""
DeckIndex - Immutable, ordered collection of lesson units.

Ordering rule:
- Units whose name starts with an integer ("03. Collection", "1.Basic")
  come first, by that integer.
- Units without a number ("What is new") follow, by title.
- Ties in either group are broken by unit id.

The index is built once from source descriptors and never mutated.
Reloading means building a new index.
"""

import logging
from typing import Iterable, Iterator, Optional

from lessondeck.errors import DuplicateUnitError, EmptyDeckError, NotFoundError, SourceError
from lessondeck.schemas import LessonUnit, SourceDescriptor
from lessondeck.utils import derive_title, parse_order, slugify


logger = logging.getLogger(__name__)


def sort_key(unit_id: str, title: str, order: Optional[int]) -> tuple:
    """Deck sort key: numbered units first by number, then the rest by title."""
    if order is not None:
        return (0, order, "", unit_id)
    return (1, 0, title, unit_id)


class DeckIndex:
    """
    Ordered, read-only index of lesson units.

    Safe to share between readers: nothing on it changes after build().
    """

    def __init__(self, units: Iterable[LessonUnit], title: Optional[str] = None):
        """
        Wrap already-ordered units. Use DeckIndex.build() to create from sources.

        Args:
            units: Units in navigation order, positions 1..n
            title: Optional deck title

        Raises:
            EmptyDeckError: If units is empty
            DuplicateUnitError: If two units share an id
        """
        self._units: tuple[LessonUnit, ...] = tuple(units)
        if not self._units:
            raise EmptyDeckError()
        self._index: dict[str, int] = {}
        for idx, unit in enumerate(self._units):
            if unit.id in self._index:
                first = self._units[self._index[unit.id]]
                raise DuplicateUnitError(unit.id, first.name, unit.name)
            self._index[unit.id] = idx
        self.title = title

    @classmethod
    def build(cls, sources: Iterable[SourceDescriptor], title: Optional[str] = None) -> "DeckIndex":
        """
        Build an index from raw source descriptors.

        Args:
            sources: One descriptor per lesson
            title: Optional deck title

        Returns:
            New DeckIndex

        Raises:
            EmptyDeckError: If there are no sources
            SourceError: If a name normalizes to an empty id
            DuplicateUnitError: If two names normalize to the same id
        """
        pending = []
        seen: dict[str, str] = {}

        for source in sources:
            unit_id = slugify(source.name)
            if not unit_id:
                raise SourceError(f"Source name '{source.name}' has no usable id", source.origin)

            previous = seen.get(unit_id)
            if previous is not None:
                raise DuplicateUnitError(unit_id, previous, source.name)
            seen[unit_id] = source.name

            order = source.order if source.order is not None else parse_order(source.name)
            unit_title = source.title or derive_title(source.name)
            pending.append((sort_key(unit_id, unit_title, order), unit_id, unit_title, order, source))

        pending.sort(key=lambda item: item[0])

        units = [
            LessonUnit(
                id=unit_id,
                name=source.name,
                title=unit_title,
                order=order,
                position=position,
                body=source.text,
                language=source.language,
                origin=source.origin,
            )
            for position, (_, unit_id, unit_title, order, source) in enumerate(pending, start=1)
        ]

        logger.info(f"Built deck with {len(units)} units")
        return cls(units, title=title)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve_id(self, unit_id: str) -> str:
        """
        Map a user-supplied id or source name to a unit id.

        Both "03-collection" and "03. Collection" resolve to the same unit.

        Raises:
            NotFoundError: If nothing matches
        """
        if unit_id in self._index:
            return unit_id
        normalized = slugify(unit_id)
        if normalized in self._index:
            return normalized
        raise NotFoundError(unit_id)

    def get(self, unit_id: str) -> LessonUnit:
        """Get a unit by id or source name."""
        return self._units[self._index[self.resolve_id(unit_id)]]

    def index_of(self, unit_id: str) -> int:
        """0-based index of a unit in navigation order."""
        return self._index[self.resolve_id(unit_id)]

    def at(self, idx: int) -> LessonUnit:
        return self._units[idx]

    def all(self) -> tuple[LessonUnit, ...]:
        """All units in navigation order; safe to iterate repeatedly."""
        return self._units

    def ids(self) -> list[str]:
        return [unit.id for unit in self._units]

    def first(self) -> LessonUnit:
        return self._units[0]

    def last(self) -> LessonUnit:
        return self._units[-1]

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[LessonUnit]:
        return iter(self._units)

    def __contains__(self, unit_id: object) -> bool:
        if not isinstance(unit_id, str):
            return False
        try:
            self.resolve_id(unit_id)
        except NotFoundError:
            return False
        return True

    def __repr__(self) -> str:
        return f"DeckIndex(title={self.title!r}, units={len(self._units)})"
