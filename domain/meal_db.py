import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from domain.models import Recipe


logger = logging.getLogger(__name__)


MEAL_DB_URL = "https://www.themealdb.com/api/json/v1/1/"
TIMEOUT = 20


class MealDBError(Exception):
    """The meal database could not be reached or sent something unusable."""


class MealsEnvelope(BaseModel):
    meals: list[dict[str, Any]] | None = None


def meal_db_client_factory(
    base_url: str = MEAL_DB_URL,
    timeout: float | None = TIMEOUT,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Accept": "application/json"},
        timeout=timeout,
    )


class MealDBClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str = MEAL_DB_URL,
        timeout: float | None = TIMEOUT,
    ) -> None:
        self.http_client = (
            meal_db_client_factory(base_url, timeout)
            if http_client is None
            else http_client
        )

    async def _meals(
        self,
        path: str,
        params: dict[str, str] | None = None,
    ) -> list[Recipe]:
        try:
            resp = await self.http_client.get(path, params=params)
            resp.raise_for_status()
            envelope = MealsEnvelope.model_validate(resp.json())
            return [Recipe.from_record(record) for record in envelope.meals or []]
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise MealDBError(f"Request to {path} failed: {e!r}") from e
        except (ValidationError, ValueError) as e:
            raise MealDBError(f"Malformed response from {path}: {e}") from e

    async def random_meal(self) -> Recipe:
        logger.info("Fetching a random meal")
        meals = await self._meals("random.php")
        if not meals:
            raise MealDBError("random.php returned no meal.")
        return meals[0]

    async def search_meals(self, query: str) -> list[Recipe]:
        """Meals whose name matches `query`. No match is an empty list."""
        logger.info("Searching meals for %r", query)
        return await self._meals("search.php", params={"s": query.strip()})

    async def aclose(self) -> None:
        await self.http_client.aclose()
