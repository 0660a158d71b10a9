import re
from typing import List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString

from .raw import RawRecipe

# Only this much markup after the Recipe itemtype tag is ever scanned
MICRODATA_WINDOW_CHARS = 50_000

# No trailing [^>]*>: the match must stay linear on unterminated tags
RECIPE_ITEMTYPE_REGEX = re.compile(
    r'<[^<>]*itemtype\s*=\s*["\']https?://schema\.org/Recipe["\']',
    re.IGNORECASE,
)


def _itemprop(*props: str) -> dict:
    names = "|".join(re.escape(p) for p in props)
    return {"itemprop": re.compile(rf"^\s*(?:{names})\s*$", re.IGNORECASE)}


NAME_ATTRS = _itemprop("name")
DESCRIPTION_ATTRS = _itemprop("description")
INGREDIENT_ATTRS = _itemprop("recipeIngredient")
INSTRUCTION_ATTRS = _itemprop("text", "recipeInstructions")


def _leading_text(element) -> str:
    # Element text = the text right after the opening tag, up to the next tag
    first = next(iter(element.contents), None)
    if isinstance(first, NavigableString) and not isinstance(first, Comment):
        return str(first).strip()
    return ""


def _first_text(soup: BeautifulSoup, attrs: dict) -> Optional[str]:
    element = soup.find(attrs=attrs)
    return _leading_text(element) if element is not None else None


def _all_texts(soup: BeautifulSoup, attrs: dict) -> List[str]:
    return [_leading_text(el) for el in soup.find_all(attrs=attrs)]


def find_microdata_recipe(html: str) -> Optional[RawRecipe]:
    """
    Fallback locator for pages using itemscope/itemprop markup.
    Returns None unless a name or at least one ingredient was found.
    """
    anchor = RECIPE_ITEMTYPE_REGEX.search(html)
    if anchor is None:
        return None

    start = anchor.start()
    soup = BeautifulSoup(html[start:start + MICRODATA_WINDOW_CHARS], "lxml")

    name = _first_text(soup, NAME_ATTRS)
    description = _first_text(soup, DESCRIPTION_ATTRS)
    ingredients = _all_texts(soup, INGREDIENT_ATTRS)
    instructions = _all_texts(soup, INSTRUCTION_ATTRS)

    if not name and not ingredients:
        return None

    values = {}
    if name is not None:
        values["name"] = name
    if description is not None:
        values["description"] = description
    if ingredients:
        values["ingredients"] = ingredients
    if instructions:
        values["instructions"] = instructions
    return RawRecipe(**values)
