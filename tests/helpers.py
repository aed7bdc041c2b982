from typing import Any, Callable

import httpx

from mealfinder.domain.models import SearchResponse


type Handler = Callable[[httpx.Request], httpx.Response]


LOOKUP_URL = "http://meals.test/api"
MEALDB_URL = "http://mealdb.test/api/json/v1/1"


ARRABIATA = {"id": 1, "name": "Arrabiata", "image": "x.jpg", "ingredientCount": 3}


def mock_client(handler: Handler, base_url: str) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=base_url)


def mealdb_record(
    id: str,
    name: str,
    ingredients: list[tuple[str | None, str | None]],
    **extra: Any,
) -> dict[str, Any]:
    """A TheMealDB style record with the twenty ingredient slots filled in."""
    record: dict[str, Any] = {
        "idMeal": id,
        "strMeal": name,
        "strMealThumb": f"https://www.themealdb.com/images/media/meals/{id}.jpg",
        "strInstructions": f"Cook the {name.lower()}.",
        "strCategory": None,
        "strArea": None,
        "strTags": None,
        "strYoutube": None,
        "strSource": None,
    }
    record.update(extra)
    for i in range(1, 21):
        ingredient, measure = ingredients[i - 1] if i <= len(ingredients) else ("", "")
        record[f"strIngredient{i}"] = ingredient
        record[f"strMeasure{i}"] = measure
    return record


class FakeLookup:
    """Resolves every search with the same response, or raises."""

    def __init__(
        self,
        resp: SearchResponse | dict[str, Any] | None = None,
        exc: Exception | None = None,
    ) -> None:
        if isinstance(resp, dict):
            resp = SearchResponse.model_validate(resp)
        self.resp = resp
        self.exc = exc
        self.calls: list[str] = []
        self.closed = False

    async def search(self, name: str) -> SearchResponse:
        self.calls.append(name)
        if self.exc is not None:
            raise self.exc
        assert self.resp is not None
        return self.resp

    async def aclose(self) -> None:
        self.closed = True
