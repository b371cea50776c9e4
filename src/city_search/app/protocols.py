from typing import Protocol, runtime_checkable


@runtime_checkable
class Locatable(Protocol):
    """Anything with plane coordinates: a bare Point or a named City."""

    x: float
    y: float
