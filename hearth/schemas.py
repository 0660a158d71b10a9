"""Pydantic schemas for the Hearth API.

The extraction response itself is hearth.parsing.ExtractedRecipe.
"""

from typing import Optional

from pydantic import BaseModel


class RecipeExtractRequest(BaseModel):
    # Optional so a missing url gets the same 400 as an empty one
    url: Optional[str] = None


class ErrorOut(BaseModel):
    message: str
    code: str


class ReadyOut(BaseModel):
    ok: bool
    redis_ok: bool
