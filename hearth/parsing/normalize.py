"""Normalization of a located RawRecipe into an ExtractedRecipe.

schema.org lets publishers encode the same field in several shapes: a
string, a list of strings, an object, a list of objects, or (for
instructions) HowToSection objects nesting HowToSteps. Each extractor below
tries the legal shapes in a fixed order and takes the first that fits;
shapes are never merged.

Everything here is total: unknown shapes become empty defaults, never
exceptions.
"""

from typing import Any, List

from .durations import parse_duration
from .raw import RawRecipe
from .recipe import ExtractedIngredient, ExtractedRecipe, ExtractedStep

SECTION_ITEMS_KEY = "itemListElement"

# Sections nested deeper than this contribute no steps
MAX_SECTION_DEPTH = 32


def _is_list_of(value: Any, kind: type) -> bool:
    return isinstance(value, list) and all(isinstance(v, kind) for v in value)


# --- Ingredients ---

def extract_ingredients(raw: Any) -> List[ExtractedIngredient]:
    if _is_list_of(raw, str):
        texts = [s.strip() for s in raw]
    elif isinstance(raw, str):
        texts = [raw.strip()]
    else:
        texts = []
    return [ExtractedIngredient(text=t) for t in texts if t]


# --- Steps ---

def _step_text(obj: dict) -> str:
    # Prefer "text", fall back to "name" (HowToStep vs bare HowToSection titles)
    for key in ("text", "name"):
        value = obj.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def _collect_step_texts(items: List[dict], out: List[str], depth: int = 0) -> None:
    if depth > MAX_SECTION_DEPTH:
        return
    for obj in items:
        if SECTION_ITEMS_KEY in obj:
            sub_items = obj[SECTION_ITEMS_KEY]
            if _is_list_of(sub_items, dict):
                _collect_step_texts(sub_items, out, depth + 1)
            continue

        text = _step_text(obj)
        if text:
            out.append(text)


def extract_steps(raw: Any) -> List[ExtractedStep]:
    """
    Resolve recipeInstructions into numbered steps.

    Precedence: list of strings, single string, list of objects (HowToStep
    or HowToSection). Positions run 1..N over the emitted steps only, so
    blank entries and sections never leave gaps.
    """
    texts: List[str] = []
    if _is_list_of(raw, str):
        texts = [s.strip() for s in raw if s.strip()]
    elif isinstance(raw, str):
        if raw.strip():
            texts = [raw.strip()]
    elif _is_list_of(raw, dict):
        _collect_step_texts(raw, texts)

    return [ExtractedStep(text=t, position=i) for i, t in enumerate(texts, start=1)]


# --- Servings ---

def extract_servings(raw: Any) -> str:
    # Verbatim, not trimmed: "4 servings " stays as the publisher wrote it
    if _is_list_of(raw, str) and raw:
        return raw[0]
    if isinstance(raw, str):
        return raw
    return ""


# --- Image ---

def extract_image_url(raw: Any) -> str:
    if isinstance(raw, str):
        return raw

    if _is_list_of(raw, str) and raw:
        return raw[0]

    if isinstance(raw, dict):
        url = raw.get("url")
        if isinstance(url, str) and url:
            return url
        return ""

    if _is_list_of(raw, dict) and raw:
        url = raw[0].get("url")
        return url if isinstance(url, str) else ""

    return ""


# --- Pipeline ---

def normalize_recipe(raw: RawRecipe, source_url: str) -> ExtractedRecipe:
    return ExtractedRecipe(
        title=raw.name or "",
        description=raw.description or "",
        ingredients=extract_ingredients(raw.ingredients),
        steps=extract_steps(raw.instructions),
        prep_time=parse_duration(raw.prep_time),
        cook_time=parse_duration(raw.cook_time),
        total_time=parse_duration(raw.total_time),
        servings=extract_servings(raw.yield_),
        image_url=extract_image_url(raw.image),
        source_url=source_url,
    )
