"""Which view the page shows and how fetches move it.

Exactly one `Mode` is active. Fetches set `LOADING` first and always finish
in a data mode or in `ERROR`. Overlapping fetches are ordered by ticket: an
outcome is applied only if no newer fetch was started after it.
"""
from enum import Enum
import itertools
import logging

from domain.meal_db import MealDBClient
from domain.models import Ingredient, Recipe, get_ingredients


logger = logging.getLogger(__name__)


RANDOM_FAILED = "Failed to fetch meal data"
SEARCH_FAILED = "Failed to search meals"


class Mode(Enum):
    LOADING = "loading"
    ERROR = "error"
    SEARCH_RESULTS = "search-results"
    SINGLE_RECIPE = "single-recipe"


class ViewState:
    def __init__(self, *, query_text: str = "") -> None:
        self.mode = Mode.LOADING
        self.single_recipe: Recipe | None = None
        self.result_list: list[Recipe] = []
        self.error_message: str | None = None
        self.query_text = query_text

    def __repr__(self) -> str:
        return (
            f"<ViewState(mode={self.mode.name}, recipe={self.single_recipe!r}, "
            f"results={len(self.result_list)}, error={self.error_message!r})>"
        )

    def loading(self) -> None:
        self.mode = Mode.LOADING
        self.single_recipe = None
        self.result_list = []
        self.error_message = None

    def show_recipe(self, recipe: Recipe) -> None:
        self.mode = Mode.SINGLE_RECIPE
        self.single_recipe = recipe
        self.result_list = []
        self.error_message = None

    def show_results(self, recipes: list[Recipe]) -> None:
        self.mode = Mode.SEARCH_RESULTS
        self.result_list = list(recipes)
        self.single_recipe = None
        self.error_message = None

    def fail(self, message: str) -> None:
        self.mode = Mode.ERROR
        self.error_message = message
        self.single_recipe = None
        self.result_list = []


class ViewStateController:
    def __init__(
        self,
        client: MealDBClient,
        *,
        state: ViewState | None = None,
    ) -> None:
        self.client = client
        self.state = ViewState() if state is None else state
        self._tickets = itertools.count(1)
        self.latest_ticket = 0

    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def is_loading(self) -> bool:
        return self.state.mode is Mode.LOADING

    @property
    def is_error(self) -> bool:
        return self.state.mode is Mode.ERROR

    @property
    def is_searching(self) -> bool:
        return self.state.mode is Mode.SEARCH_RESULTS

    @property
    def has_fetched(self) -> bool:
        return self.latest_ticket > 0

    @property
    def ingredients(self) -> list[Ingredient]:
        if self.state.single_recipe is None:
            return []
        return get_ingredients(self.state.single_recipe)

    def _dispatch(self) -> int:
        self.latest_ticket = next(self._tickets)
        self.state.loading()
        return self.latest_ticket

    def _is_stale(self, ticket: int) -> bool:
        if ticket != self.latest_ticket:
            logger.debug(
                "Discarding outcome %d, %d is newer", ticket, self.latest_ticket
            )
            return True
        return False

    async def fetch_random(self) -> None:
        # Any failure on the fetch path ends in ERROR, never in LOADING.
        ticket = self._dispatch()
        try:
            recipe = await self.client.random_meal()
        except Exception:
            if not self._is_stale(ticket):
                logger.error(RANDOM_FAILED, exc_info=True)
                self.state.fail(RANDOM_FAILED)
            return
        if not self._is_stale(ticket):
            self.state.show_recipe(recipe)

    async def search(self, query: str) -> None:
        if not query.strip():
            self.state.result_list = []
            return

        ticket = self._dispatch()
        try:
            recipes = await self.client.search_meals(query)
        except Exception:
            if not self._is_stale(ticket):
                logger.error(SEARCH_FAILED, exc_info=True)
                self.state.fail(SEARCH_FAILED)
            return
        if not self._is_stale(ticket):
            self.state.show_results(recipes)

    def select_from_results(self, recipe: Recipe) -> None:
        if self.state.mode is not Mode.SEARCH_RESULTS:
            raise ValueError("No search results to select from.")
        if recipe not in self.state.result_list:
            raise ValueError(f"{recipe!r} is not in the current results.")
        self.state.show_recipe(recipe)

    def result_by_id(self, id: str) -> Recipe | None:
        return next((r for r in self.state.result_list if r.id == id), None)

    def get_ingredients(self, recipe: Recipe) -> list[Ingredient]:
        return get_ingredients(recipe)
