import logging

from ..infra.recipe_cache import get_cached_recipe, store_recipe
from ..parsing import ExtractedRecipe, extract_recipe
from .fetcher import fetch_html
from .url_guard import validate_target_url

logger = logging.getLogger("hearth.recipes")


async def import_recipe_from_url(raw_url: str | None) -> ExtractedRecipe:
    """Validate, fetch and extract a recipe from a web page.

    Every failure surfaces as a HearthError subclass; see hearth.errors.
    """
    url = validate_target_url(raw_url)

    cached = await get_cached_recipe(url)
    if cached is not None:
        logger.info(f"Recipe cache hit for {url}")
        return cached

    html = await fetch_html(url)
    recipe = extract_recipe(html, url)

    await store_recipe(recipe)
    return recipe
