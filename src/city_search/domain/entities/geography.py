from dataclasses import dataclass


# Core geometry types used by the search
@dataclass(frozen=True)
class Point:
    x: float  # plane units; y grows southward
    y: float


@dataclass(frozen=True)
class City:
    """A named point. Identity for lookups is the name alone."""

    name: str
    x: float
    y: float
