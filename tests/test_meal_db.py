from typing import Any, Callable

import httpx
import pytest

from domain.meal_db import MealDBClient, MealDBError


Record = Callable[..., dict[str, Any]]
MealDB = Callable[..., MealDBClient]


@pytest.mark.asyncio
async def test_random_meal(meal_db: MealDB, record: Record) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"meals": [record()]})

    got = await meal_db(handler).random_meal()
    assert got.id == "52772"
    assert len(seen) == 1
    assert seen[0].url.path == "/api/json/v1/1/random.php"


@pytest.mark.parametrize("body", ({"meals": None}, {"meals": []}, {}))
@pytest.mark.asyncio
async def test_random_meal_without_meal(meal_db: MealDB, body: dict[str, Any]) -> None:
    client = meal_db(lambda request: httpx.Response(200, json=body))
    with pytest.raises(MealDBError):
        await client.random_meal()


@pytest.mark.asyncio
async def test_search_meals(meal_db: MealDB, record: Record) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"meals": [record(), record("52773", "Chicken Handi")]},
        )

    got = await meal_db(handler).search_meals("  chicken & rice ")
    assert [r.name for r in got] == ["Teriyaki Chicken Casserole", "Chicken Handi"]
    assert seen[0].url.path == "/api/json/v1/1/search.php"
    assert seen[0].url.params["s"] == "chicken & rice"


@pytest.mark.parametrize("body", ({"meals": None}, {}))
@pytest.mark.asyncio
async def test_search_meals_no_match(meal_db: MealDB, body: dict[str, Any]) -> None:
    client = meal_db(lambda request: httpx.Response(200, json=body))
    assert await client.search_meals("xyzzy") == []


@pytest.mark.parametrize(
    "response",
    (
        httpx.Response(500, text="Internal Server Error"),
        httpx.Response(404, json={"meals": None}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json=["meals"]),
        httpx.Response(200, json={"meals": ["not a record"]}),
        httpx.Response(200, json={"meals": [{"strMeal": "No id"}]}),
    ),
)
@pytest.mark.asyncio
async def test_bad_response(meal_db: MealDB, response: httpx.Response) -> None:
    client = meal_db(lambda request: response)
    with pytest.raises(MealDBError):
        await client.search_meals("chicken")


@pytest.mark.asyncio
async def test_transport_error(meal_db: MealDB) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(MealDBError) as excinfo:
        await meal_db(handler).random_meal()
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_oversized_query(meal_db: MealDB) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"meals": None})

    with pytest.raises(MealDBError) as excinfo:
        await meal_db(handler).search_meals("a" * 70_000)
    assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)
    assert seen == []
