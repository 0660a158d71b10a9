"""Recipe extraction API router.

Endpoints:
- POST /api/recipes/extract - Extract a recipe from a web page's schema.org markup
"""

import logging

from fastapi import APIRouter, Depends

from ..deps import enforce_extract_rate_limit
from ..parsing import ExtractedRecipe
from ..schemas import ErrorOut, RecipeExtractRequest
from ..services.recipe_import import import_recipe_from_url

router = APIRouter()
logger = logging.getLogger("hearth.recipes")


@router.post(
    "/recipes/extract",
    response_model=ExtractedRecipe,
    dependencies=[Depends(enforce_extract_rate_limit)],
    responses={
        400: {"model": ErrorOut},
        422: {"model": ErrorOut},
        429: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
)
async def extract_recipe_from_url(payload: RecipeExtractRequest):
    """Fetch a page and return the recipe found in its JSON-LD or microdata."""
    logger.info(f"Extract requested for {payload.url!r}")
    return await import_recipe_from_url(payload.url)
