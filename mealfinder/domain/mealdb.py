import logging
from typing import Any

import httpx

from mealfinder.domain.errors import MealDBError
from mealfinder.domain.models import Ingredient, Meal


logger = logging.getLogger(__name__)


MEALDB_API_URL = "https://www.themealdb.com/api/json/v1/1"
MAX_INGREDIENTS = 20
TIMEOUT = 20

# Transport, status, json and record shape problems all mean the same thing here.
FAILURES = (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError)


type MealRecord = dict[str, Any]


def _text(record: MealRecord, key: str) -> str | None:
    value = record.get(key)
    return None if value is None else str(value)


def ingredients_from_record(record: MealRecord) -> list[Ingredient]:
    """TheMealDB flattens ingredients into `strIngredient1..20`."""
    ingredients: list[Ingredient] = []
    for i in range(1, MAX_INGREDIENTS + 1):
        name = (_text(record, f"strIngredient{i}") or "").strip()
        if not name:
            continue
        measure = (_text(record, f"strMeasure{i}") or "").strip()
        ingredients.append(Ingredient(name=name, measure=measure))
    return ingredients


def parse_meal(record: MealRecord) -> Meal:
    ingredients = ingredients_from_record(record)
    return Meal(
        id=record["idMeal"],
        name=record["strMeal"],
        image=record["strMealThumb"],
        ingredients=tuple(ingredients),
        ingredient_count=len(ingredients),
        instructions=_text(record, "strInstructions"),
        category=_text(record, "strCategory"),
        area=_text(record, "strArea"),
        tags=_text(record, "strTags"),
        youtube_url=_text(record, "strYoutube"),
        source=_text(record, "strSource"),
    )


class MealDBClient:
    def __init__(
        self,
        base_url: str = MEALDB_API_URL,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = TIMEOUT,
    ) -> None:
        self.http_client = (
            httpx.AsyncClient(base_url=base_url, timeout=timeout)
            if http_client is None
            else http_client
        )

    async def _meals(self, path: str, params: dict[str, str] | None = None) -> list[Meal]:
        logger.info("Fetching meals from %s %s", path, params or "")
        resp = await self.http_client.get(path, params=params)
        resp.raise_for_status()
        records = resp.json().get("meals") or []
        return [parse_meal(r) for r in records]

    async def search_meals_by_name(self, name: str) -> list[Meal]:
        """Meals matching `name`, fewest ingredients first."""
        try:
            meals = await self._meals("/search.php", {"s": name})
        except FAILURES as e:
            logger.error("Error searching meals: %r", e)
            raise MealDBError("Failed to search meals") from e
        return sorted(meals, key=lambda m: m.ingredient_count)

    async def meal_with_least_ingredients(self, name: str) -> Meal | None:
        meals = await self.search_meals_by_name(name)
        return meals[0] if meals else None

    async def random_meal(self) -> Meal | None:
        try:
            meals = await self._meals("/random.php")
        except FAILURES as e:
            logger.error("Error fetching random meal: %r", e)
            raise MealDBError("Failed to fetch random meal") from e
        return meals[0] if meals else None

    async def aclose(self) -> None:
        await self.http_client.aclose()
