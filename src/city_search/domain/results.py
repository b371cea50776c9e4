from collections.abc import Iterator
from dataclasses import dataclass

from city_search.domain.entities.geography import City


@dataclass(frozen=True)
class Match:
    distance: float  # >= 0, never above the query radius
    city: City


@dataclass(frozen=True)
class QueryResult:
    """
    Matches of one query, ascending by distance.
    Equal distances keep the store's insertion order.
    """

    matches: tuple[Match, ...] = ()

    def __iter__(self) -> Iterator[Match]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    def __getitem__(self, i: int) -> Match:
        return self.matches[i]

    def cities(self) -> list[City]:
        return [m.city for m in self.matches]

    def names(self) -> list[str]:
        return [m.city.name for m in self.matches]

    def distances(self) -> list[float]:
        return [m.distance for m in self.matches]
