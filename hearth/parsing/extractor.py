import logging
from typing import Optional, Tuple

from ..errors import EmptyExtractionError, NoStructuredDataError
from .jsonld import find_jsonld_recipe
from .microdata import find_microdata_recipe
from .normalize import normalize_recipe
from .raw import RawRecipe
from .recipe import ExtractedRecipe

logger = logging.getLogger("hearth.extract")


def locate_recipe(html: str) -> Tuple[Optional[RawRecipe], Optional[str]]:
    """Run the locators in order. Returns (raw, strategy) or (None, None).

    Microdata is only consulted when no JSON-LD block yields a Recipe.
    """
    raw = find_jsonld_recipe(html)
    if raw is not None:
        return raw, "jsonld"

    raw = find_microdata_recipe(html)
    if raw is not None:
        return raw, "microdata"

    return None, None


def extract_recipe(html: str, source_url: str) -> ExtractedRecipe:
    """
    Locate and normalize the recipe embedded in a page.

    Raises:
        NoStructuredDataError: If neither locator finds a Recipe
        EmptyExtractionError: If the Recipe has no title, ingredients or steps
    """
    raw, strategy = locate_recipe(html)
    if raw is None:
        logger.info(f"No structured recipe data found for {source_url}")
        raise NoStructuredDataError()

    recipe = normalize_recipe(raw, source_url)
    if recipe.is_empty():
        logger.info(f"Recipe located via {strategy} but empty after normalization for {source_url}")
        raise EmptyExtractionError()

    logger.info(
        f"Extracted recipe via {strategy} for {source_url}: "
        f"{len(recipe.ingredients)} ingredients, {len(recipe.steps)} steps"
    )
    return recipe
