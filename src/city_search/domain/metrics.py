# city_search/domain/metrics.py
from enum import IntEnum

import numpy as np

from city_search.errors import InvalidArgument


class Norm(IntEnum):
    """Distance norm selector. Values match the shell's numeric menu."""

    L2 = 0
    LINF = 1
    L1 = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def coerce(cls, tag) -> "Norm":
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, bool):
            raise InvalidArgument(f"Unknown norm {tag!r}")
        if isinstance(tag, (int, np.integer)):
            try:
                return cls(int(tag))
            except ValueError:
                raise InvalidArgument(f"Norm must be 0, 1 or 2, got {tag!r}") from None
        if isinstance(tag, str):
            try:
                return _ALIASES[tag.strip().lower()]
            except KeyError:
                raise InvalidArgument(f"Unknown norm {tag!r}") from None
        raise InvalidArgument(f"Unknown norm {tag!r}")


_LABELS = {
    Norm.L2: "L2, Euclidean distance",
    Norm.LINF: "Linf, Chebyshev distance",
    Norm.L1: "L1, Manhattan distance",
}

_ALIASES = {
    "l2": Norm.L2,
    "euclidean": Norm.L2,
    "linf": Norm.LINF,
    "chebyshev": Norm.LINF,
    "l1": Norm.L1,
    "manhattan": Norm.L1,
}


# Work on floats or on numpy arrays (elementwise).
def l2_distance(x0, y0, x1, y1):
    return np.sqrt((x0 - x1) ** 2 + (y0 - y1) ** 2)


def linf_distance(x0, y0, x1, y1):
    return np.maximum(np.abs(x0 - x1), np.abs(y0 - y1))


def l1_distance(x0, y0, x1, y1):
    return np.abs(x0 - x1) + np.abs(y0 - y1)


def distance(norm, x0, y0, x1, y1):
    norm = Norm.coerce(norm)
    if norm is Norm.L2:
        return l2_distance(x0, y0, x1, y1)
    elif norm is Norm.LINF:
        return linf_distance(x0, y0, x1, y1)
    elif norm is Norm.L1:
        return l1_distance(x0, y0, x1, y1)
    else:
        raise InvalidArgument(f"Unknown norm {norm!r}")
