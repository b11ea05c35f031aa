from typing import Any, Callable

import httpx
import pytest

from domain.meal_db import MEAL_DB_URL, MealDBClient


Handler = Callable[[httpx.Request], httpx.Response]


def meal_record(
    id: str = "52772",
    name: str = "Teriyaki Chicken Casserole",
    *,
    ingredients: list[tuple[str, str]] | None = None,
    **fields: Any,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "idMeal": id,
        "strMeal": name,
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strInstructions": "Preheat oven to 350.\r\nBake for 30 minutes.",
        "strMealThumb": f"https://www.themealdb.com/images/media/meals/{id}.jpg",
        "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
        "strTags": "Meat,Casserole",
    }
    ingredients = (
        [("soy sauce", "3/4 cup"), ("water", "1/2 cup")]
        if ingredients is None
        else ingredients
    )
    for n in range(1, 21):
        ingredient, measure = ingredients[n - 1] if n <= len(ingredients) else ("", "")
        record[f"strIngredient{n}"] = ingredient
        record[f"strMeasure{n}"] = measure
    record.update(fields)
    return record


@pytest.fixture
def record() -> Callable[..., dict[str, Any]]:
    return meal_record


@pytest.fixture
def meal_db() -> Callable[[Handler], MealDBClient]:
    def factory(handler: Handler) -> MealDBClient:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=MEAL_DB_URL,
        )
        return MealDBClient(http_client)

    return factory
