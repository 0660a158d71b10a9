from typing import Any, Optional
from pydantic import BaseModel

# schema.org Recipe key -> RawRecipe field
JSONLD_FIELD_MAP = {
    "name": "name",
    "description": "description",
    "recipeIngredient": "ingredients",
    "recipeInstructions": "instructions",
    "recipeYield": "yield_",
    "image": "image",
    "prepTime": "prep_time",
    "cookTime": "cook_time",
    "totalTime": "total_time",
}

# Fields that must be JSON strings to be kept
STRING_FIELDS = {"name", "description", "prep_time", "cook_time", "total_time"}


class RawRecipe(BaseModel):
    """Locator output, before any shape resolution.

    ingredients/instructions/yield_/image hold whatever JSON value the page
    used. A field is only in ``model_fields_set`` if the page had the key.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    ingredients: Any = None
    instructions: Any = None
    yield_: Any = None
    image: Any = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None

    @classmethod
    def from_jsonld(cls, obj: dict) -> "RawRecipe":
        values = {}
        for key, field in JSONLD_FIELD_MAP.items():
            if key not in obj:
                continue
            value = obj[key]
            if field in STRING_FIELDS and not isinstance(value, str):
                continue
            values[field] = value
        return cls(**values)
