from typing import Any, NamedTuple


SLOT_COUNT = 20
PARAGRAPH_SEP = "\r\n"


class IngredientSlot(NamedTuple):
    ingredient: str
    measure: str


class Ingredient(NamedTuple):
    ingredient: str
    measure: str


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class Recipe:
    def __init__(
        self,
        *,
        id: str,
        name: str,
        category: str = "",
        area: str = "",
        instructions: str = "",
        thumbnail: str = "",
        youtube: str | None = None,
        tags: str | None = None,
        slots: tuple[IngredientSlot, ...] = (),
    ) -> None:
        if len(slots) > SLOT_COUNT:
            raise ValueError(f"A recipe has at most {SLOT_COUNT} slots.")
        self.id = id
        self.name = name
        self.category = category
        self.area = area
        self.instructions = instructions
        self.thumbnail = thumbnail
        self.youtube = youtube or None
        self.tags = tags or None
        padding = (IngredientSlot("", ""),) * (SLOT_COUNT - len(slots))
        self.slots = tuple(slots) + padding

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Recipe":
        """Build a recipe from a TheMealDB meal record.

        `idMeal` and `strMeal` are required. Every other field may be missing,
        `null` or an empty string.
        """
        try:
            id, name = record["idMeal"], record["strMeal"]
        except KeyError as e:
            raise ValueError(f"Meal record is missing {e.args[0]}.") from e
        if not id or not name:
            raise ValueError("Meal record has an empty id or name.")

        slots = tuple(
            IngredientSlot(
                _text(record.get(f"strIngredient{n}")),
                _text(record.get(f"strMeasure{n}")),
            )
            for n in range(1, SLOT_COUNT + 1)
        )
        return cls(
            id=str(id),
            name=_text(name),
            category=_text(record.get("strCategory")),
            area=_text(record.get("strArea")),
            instructions=_text(record.get("strInstructions")),
            thumbnail=_text(record.get("strMealThumb")),
            youtube=_text(record.get("strYoutube")).strip() or None,
            tags=_text(record.get("strTags")).strip() or None,
            slots=slots,
        )

    @property
    def ingredients(self) -> list[Ingredient]:
        return get_ingredients(self)

    @property
    def paragraphs(self) -> list[str]:
        return [p for p in self.instructions.split(PARAGRAPH_SEP) if p.strip()]

    @property
    def tag_list(self) -> list[str]:
        if not self.tags:
            return []
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.id, self.name))

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name={self.name})>"

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "area": self.area,
            "instructions": self.instructions,
            "thumbnail": self.thumbnail,
            "youtube": self.youtube,
            "tags": self.tags,
            "slots": [list(slot) for slot in self.slots],
        }


def get_ingredients(recipe: Recipe) -> list[Ingredient]:
    """Ingredient and measure pairs in slot order.

    A slot counts when its ingredient is non-blank. The measure may be blank.
    """
    return [
        Ingredient(slot.ingredient.strip(), slot.measure.strip())
        for slot in recipe.slots
        if slot.ingredient.strip()
    ]
