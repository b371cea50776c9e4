# city_search/app/shell.py
import math
import sys
from typing import TextIO

from city_search.domain.entities.geography import City
from city_search.domain.metrics import Norm
from city_search.domain.results import QueryResult
from city_search.domain.store import PointStore
from city_search.errors import InvalidArgument
from city_search.search.engine import SearchEngine

NAME_PROMPT = "Please enter selected city name (with line break after it): "
RADIUS_PROMPT = "Please enter the wanted radius: "
NORM_PROMPT = (
    "Please enter the wanted norm ("
    + ", ".join(f"{n.value} - {n.label}" for n in Norm)
    + "): "
)


class Shell:
    """
    Interactive front end: owns nothing but its streams, reads the store it is
    handed and never mutates it.
    """

    def __init__(
        self,
        store: PointStore,
        engine: SearchEngine,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        exit_sentinel: str = "0",
        default_norm: int | None = None,
    ):
        self.store, self.engine = store, engine
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.exit_sentinel = exit_sentinel
        self.default_norm = None if default_norm is None else Norm.coerce(default_norm)

    # ------------- io helpers ---------------------------

    def _say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _ask(self, prompt: str) -> str | None:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None  # EOF
        return line.rstrip("\r\n")

    def _ask_radius(self) -> float | None:
        text = self._ask(RADIUS_PROMPT)
        if text is None:
            return None
        try:
            r = float(text)
        except ValueError:
            raise InvalidArgument("Invalid input.") from None
        if math.isnan(r):
            raise InvalidArgument("Invalid input.")
        if r < 0:
            raise InvalidArgument("Invalid radius. Please enter a non-negative value.")
        return r

    def _ask_norm(self) -> Norm | None:
        if self.default_norm is not None:
            return self.default_norm
        text = self._ask(NORM_PROMPT)
        if text is None:
            return None
        try:
            n = int(text)
        except ValueError:
            raise InvalidArgument("Invalid input.") from None
        try:
            return Norm.coerce(n)
        except InvalidArgument:
            raise InvalidArgument(
                "Invalid norm. Please enter a valid norm number (0, 1, or 2)."
            ) from None

    # ------------- queries ------------------------------

    def report(self, result: QueryResult, reference: City) -> None:
        self._say("Search result:")
        self._say(f"{len(result)} city/cities found within the given radius.")
        north = self.engine.count_north(result, reference)
        self._say(f"{north} cities are to the north of the selected city.")
        self._say("City list:")
        for match in result:
            self._say(match.city.name)

    def _not_found(self, name: str) -> None:
        self._say(f'ERROR: "{name}" isn\'t found in the city list. Please try again.')

    def _answer(self, city: City, radius, norm) -> QueryResult:
        result = self.engine.query(self.store, city, radius, norm)
        self.report(result, city)
        return result

    def run_once(self, name: str, radius, norm) -> QueryResult | None:
        """Look up, query and print. None when the name is unknown."""
        city = self.store.find_by_name(name)
        if city is None:
            self._not_found(name)
            return None
        return self._answer(city, radius, norm)

    def run(self) -> int:
        """Prompt until the exit sentinel or end of input. Returns queries answered."""
        answered = 0
        while True:
            name = self._ask(NAME_PROMPT)
            if name is None or name == self.exit_sentinel:
                self._say("Bye")
                return answered
            city = self.store.find_by_name(name)
            if city is None:
                self._not_found(name)
                self._say()
                continue
            try:
                radius = self._ask_radius()
                norm = None if radius is None else self._ask_norm()
            except InvalidArgument as e:
                self._say(str(e))
                self._say()
                continue
            if radius is None or norm is None:
                self._say("Bye")
                return answered
            self._answer(city, radius, norm)
            answered += 1
            self._say()
