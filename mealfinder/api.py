"""JSON meal api in front of TheMealDB.

Every response is a `{success, message, data}` envelope.
"""

import functools
import logging
from typing import Any, Awaitable, Callable

from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from mealfinder.domain.errors import MealDBError
from mealfinder.domain.mealdb import MealDBClient


logger = logging.getLogger(__name__)


type Envelope = tuple[bool, str, Any]


def envelope(success: bool, message: str, data: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": success, "message": message}
    if data is not None:
        body["data"] = data
    return body


def aJSONResponse(route: Callable[..., Awaitable[Envelope | tuple[Envelope, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> JSONResponse:
        resp = await route(*args, **kwargs)
        if isinstance(resp[0], tuple):
            (success, message, data), code = resp
        else:
            (success, message, data), code = resp, 200
        return JSONResponse(envelope(success, message, data), status_code=code)

    return wrapper


def _mealdb(request: Request) -> MealDBClient:
    return request.app.state.mealdb


@aJSONResponse
async def health(request: Request) -> Envelope:
    return True, "MealDB Backend is running!", "OK"


@aJSONResponse
async def search(request: Request) -> Envelope | tuple[Envelope, int]:
    name = request.query_params.get("name")
    if name is None:
        return (False, "Missing required parameter: name", None), 400

    logger.info("Searching for meals with name: %s", name)
    try:
        meals = await _mealdb(request).search_meals_by_name(name)
    except MealDBError as e:
        logger.error("Error searching meals: %s", e)
        return (False, f"Error searching meals: {e}", None), 500

    if not meals:
        return False, f"No meals found for: {name}", None
    return True, "Success", [m.to_dict() for m in meals]


@aJSONResponse
async def least_ingredients(request: Request) -> Envelope | tuple[Envelope, int]:
    name = request.query_params.get("name")
    logger.info("Fetching meal with least ingredients for: %s", name or "any")
    try:
        if not name:
            meal = await _mealdb(request).random_meal()
            if meal is None:
                return False, "Could not fetch meal", None
        else:
            meal = await _mealdb(request).meal_with_least_ingredients(name)
            if meal is None:
                return False, f"No meals found for: {name}", None
    except MealDBError as e:
        logger.error("Error fetching meal with least ingredients: %s", e)
        return (False, f"Error fetching meal: {e}", None), 500
    return True, "Success", meal.to_dict()


@aJSONResponse
async def random_meal(request: Request) -> Envelope | tuple[Envelope, int]:
    logger.info("Fetching random meal")
    try:
        meal = await _mealdb(request).random_meal()
    except MealDBError as e:
        logger.error("Error fetching random meal: %s", e)
        return (False, f"Error fetching random meal: {e}", None), 500

    if meal is None:
        return False, "Could not fetch random meal", None
    return True, "Success", meal.to_dict()


def create_api(cors_origins: list[str], path: str = "/api") -> Mount:
    return Mount(
        path,
        routes=[
            Route("/meals/health", health),
            Route("/meals/search", search),
            Route("/meals/least-ingredients", least_ingredients),
            Route("/meals/random", random_meal),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=cors_origins,
                allow_methods=["GET"],
            )
        ],
    )
