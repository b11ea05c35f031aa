from jinja2 import Environment

from domain.models import Ingredient, Recipe


class MealDetail:
    def __init__(
        self,
        recipe: Recipe,
        *,
        environment: Environment,
        template_name: str = "meal-detail.html",
    ) -> None:
        self.recipe = recipe
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return self.recipe.name

    @property
    def badges(self) -> list[str]:
        return [b for b in (self.recipe.category, self.recipe.area) if b]

    @property
    def tags(self) -> list[str]:
        return self.recipe.tag_list

    @property
    def ingredients(self) -> list[Ingredient]:
        return self.recipe.ingredients

    @property
    def paragraphs(self) -> list[str]:
        return self.recipe.paragraphs

    def render(self) -> str:
        return self.env.get_template(self.name).render(meal=self)
