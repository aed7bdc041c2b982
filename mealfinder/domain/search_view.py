"""The search flow: one query, one request in flight that counts, four states."""

from dataclasses import dataclass
import logging
from typing import Protocol

from mealfinder.domain.errors import LookupFailed
from mealfinder.domain.models import Meal, SearchResponse


logger = logging.getLogger(__name__)


NO_MEALS_FOUND = "No meals found"
FAILED_TO_FETCH = "Failed to fetch meals"


class MealLookup(Protocol):
    async def search(self, name: str) -> SearchResponse: ...


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    meals: tuple[Meal, ...]


@dataclass(frozen=True)
class Failed:
    message: str


type SearchState = Idle | Loading | Success | Failed


def outcome(resp: SearchResponse) -> Success | Failed:
    if resp.success and resp.data is not None:
        return Success(resp.data)
    return Failed(NO_MEALS_FOUND)


class SearchView:
    def __init__(self, lookup: MealLookup, query: str = "") -> None:
        self.lookup = lookup
        self.query = query
        self.state: SearchState = Idle()
        self._generation = 0

    def __repr__(self) -> str:
        return f"<SearchView(query={self.query!r}, state={self.state})>"

    def on_query_change(self, text: str) -> None:
        self.query = text

    async def on_submit(self) -> bool:
        """Run a search for the current query.

        Returns False without touching the state when the query is blank.
        Only the latest submit gets to settle the state, older responses
        are dropped.
        """
        query = self.query
        if not query.strip():
            return False

        self._generation += 1
        generation = self._generation
        self.state = Loading()

        settled: Success | Failed
        try:
            resp = await self.lookup.search(query)
        except LookupFailed:
            settled = Failed(FAILED_TO_FETCH)
        except Exception:
            logger.exception("Meal lookup for %r blew up", query)
            settled = Failed(FAILED_TO_FETCH)
        else:
            settled = outcome(resp)

        if generation != self._generation:
            logger.debug("Dropping stale result for %r", query)
            return True

        self.state = settled
        return True

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def meals(self) -> tuple[Meal, ...]:
        match self.state:
            case Success(meals=meals):
                return meals
            case _:
                return ()

    @property
    def error(self) -> str:
        match self.state:
            case Failed(message=message):
                return message
            case _:
                return ""
