from typing import List, Optional
from pydantic import BaseModel, Field


class ExtractedIngredient(BaseModel):
    text: str


class ExtractedStep(BaseModel):
    text: str
    position: int = Field(..., ge=1)


class ExtractedRecipe(BaseModel):
    title: str = ""
    description: str = ""
    ingredients: List[ExtractedIngredient] = []
    steps: List[ExtractedStep] = []
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    total_time: Optional[int] = None
    servings: str = ""
    image_url: str = ""
    source_url: str

    def is_empty(self) -> bool:
        """No title, no ingredients and no steps. Partial records are fine."""
        return not self.title and not self.ingredients and not self.steps
