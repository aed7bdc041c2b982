import logging

import httpx
from pydantic import ValidationError

from mealfinder.domain.errors import LookupFailed
from mealfinder.domain.models import SearchResponse


logger = logging.getLogger(__name__)


TIMEOUT = 20


def lookup_client_factory(base_url: str, timeout: float = TIMEOUT) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Accept": "application/json"},
        timeout=timeout,
    )


class MealLookupService:
    """Client for the `/meals/search` endpoint of a meal lookup api."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000/api",
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = TIMEOUT,
    ) -> None:
        self.http_client = (
            lookup_client_factory(base_url, timeout=timeout)
            if http_client is None
            else http_client
        )

    async def search(self, name: str) -> SearchResponse:
        """Search meals by name.

        The status code is ignored, the body decides. Anything that is not a
        readable envelope raises `LookupFailed`.
        """
        logger.info("Searching meals for %r", name)
        try:
            resp = await self.http_client.get("/meals/search", params={"name": name})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Meal lookup request failed: %r", e)
            raise LookupFailed(f"Request for {name!r} failed.") from e

        try:
            body = resp.json()
        except ValueError as e:
            logger.warning("Meal lookup sent a non json body (%s)", resp.status_code)
            raise LookupFailed("Response is not json.") from e

        if not isinstance(body, dict):
            raise LookupFailed("Response is not an object.")

        try:
            return SearchResponse.model_validate(body)
        except ValidationError as e:
            logger.warning("Meal lookup sent an invalid envelope: %s", e)
            raise LookupFailed("Response has an invalid shape.") from e

    async def aclose(self) -> None:
        await self.http_client.aclose()
