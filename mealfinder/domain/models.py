from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Ingredient(_Model):
    name: str
    measure: str = ""


class Meal(_Model):
    id: str | int
    name: str
    image: str
    ingredient_count: NonNegativeInt
    ingredients: tuple[Ingredient, ...] | None = None
    instructions: str | None = None
    category: str | None = None
    area: str | None = None
    tags: str | None = None
    youtube_url: str | None = None
    source: str | None = None

    def __repr__(self) -> str:
        return f"<Meal(id={self.id}, name={self.name})>"


class SearchResponse(_Model):
    """The `{success, message, data}` envelope of the meal lookup api."""

    success: bool = False
    # Informational only, whatever the api puts here is kept as is.
    message: Any = None
    data: tuple[Meal, ...] | None = None

    @field_validator("success", mode="before")
    @classmethod
    def _only_true_is_true(cls, value: Any) -> bool:
        # "true", 1 and friends are a malformed flag, not a success.
        return value is True
