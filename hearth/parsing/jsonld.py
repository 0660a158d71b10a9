"""JSON-LD recipe locator.

Scans every ``<script type="application/ld+json">`` block in document order
and walks the parsed JSON for a schema.org Recipe object. Recipes are often
wrapped in a top-level array or in an ``@graph`` envelope (Yoast and most
WordPress SEO plugins emit the latter), so the walk recurses through both.
"""

import json
import logging
from typing import Any, Iterator, Optional

from bs4 import BeautifulSoup

from .raw import RawRecipe

logger = logging.getLogger("hearth.extract")

LD_JSON_TYPE = "application/ld+json"
RECIPE_TYPE = "Recipe"

# Nodes nested deeper than this are not visited
MAX_WALK_DEPTH = 32


def _is_ld_json_type(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() == LD_JSON_TYPE


def iter_jsonld_blocks(html: str) -> Iterator[Any]:
    """Yield each ld+json block that parses; broken blocks are skipped."""
    soup = BeautifulSoup(html, "lxml")
    for i, script in enumerate(soup.find_all("script", attrs={"type": _is_ld_json_type})):
        raw_json = script.string or script.get_text()
        if not raw_json:
            continue
        try:
            yield json.loads(raw_json)
        except (ValueError, RecursionError) as e:
            logger.debug(f"Skipping unparsable ld+json block #{i}: {e}")


def _is_recipe_type(type_value: Any) -> bool:
    if isinstance(type_value, str):
        return type_value == RECIPE_TYPE
    if isinstance(type_value, list):
        return RECIPE_TYPE in type_value
    return False


def find_recipe_node(data: Any, depth: int = 0) -> Optional[dict]:
    """Depth-first search for the first Recipe-typed object.

    Arrays are searched element by element; an object is a match if its
    @type names Recipe, otherwise its @graph (if any) is searched. Nodes
    deeper than MAX_WALK_DEPTH are not visited.
    """
    if depth > MAX_WALK_DEPTH:
        return None

    if isinstance(data, list):
        for item in data:
            node = find_recipe_node(item, depth + 1)
            if node is not None:
                return node
        return None

    if not isinstance(data, dict):
        return None

    if _is_recipe_type(data.get("@type")):
        return data

    if "@graph" in data:
        return find_recipe_node(data["@graph"], depth + 1)

    return None


def find_jsonld_recipe(html: str) -> Optional[RawRecipe]:
    for data in iter_jsonld_blocks(html):
        node = find_recipe_node(data)
        if node is not None:
            return RawRecipe.from_jsonld(node)
    return None
