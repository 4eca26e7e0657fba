"""
Error taxonomy for lessondeck.

Every failure raised by the deck, navigator and renderer derives from
DeckError so callers can catch the whole family at once. Boundary
conditions during navigation are not errors; see deck.navigator.Boundary.
"""


class DeckError(Exception):
    """Base class for all lessondeck errors."""


class SourceError(DeckError):
    """A lesson source could not be read or is malformed."""

    def __init__(self, message: str, origin: str | None = None):
        self.origin = origin
        if origin:
            message = f"{message} ({origin})"
        super().__init__(message)


class EmptyDeckError(SourceError):
    """A deck was built from an empty source collection."""

    def __init__(self, origin: str | None = None):
        super().__init__("Deck has no lesson sources", origin)


class DuplicateUnitError(DeckError):
    """Two source descriptors normalize to the same unit id."""

    def __init__(self, unit_id: str, first_name: str, second_name: str):
        self.unit_id = unit_id
        self.names = (first_name, second_name)
        super().__init__(
            f"Duplicate unit id '{unit_id}' (from '{first_name}' and '{second_name}')"
        )


class NotFoundError(DeckError, LookupError):
    """No unit with the requested id exists in the deck."""

    def __init__(self, unit_id: str):
        self.unit_id = unit_id
        super().__init__(f"Unit not found: '{unit_id}'")


class UnsupportedFormatError(DeckError, ValueError):
    """A render was requested in a format the renderer does not know."""

    def __init__(self, target_format: str, supported: list[str]):
        self.target_format = target_format
        self.supported = supported
        super().__init__(
            f"Unsupported format '{target_format}' (expected one of: {', '.join(supported)})"
        )
