from jinja2 import Environment

from app.html.meal_detail import MealDetail
from domain.view_state import Mode, ViewState


def render_view(
    state: ViewState,
    *,
    environment: Environment,
    fetch_on_load: bool = False,
) -> str:
    """The `#view` partial for whatever mode `state` is in."""
    match state.mode:
        case Mode.LOADING:
            return environment.get_template("view-loading.html").render(
                fetch_on_load=fetch_on_load
            )
        case Mode.ERROR:
            return environment.get_template("view-error.html").render(
                message=state.error_message
            )
        case Mode.SEARCH_RESULTS:
            return environment.get_template("meal-list.html").render(
                meals=state.result_list
            )
        case Mode.SINGLE_RECIPE:
            if state.single_recipe is None:
                raise ValueError("Single recipe mode without a recipe.")
            return MealDetail(state.single_recipe, environment=environment).render()
