from .raw import RawRecipe
from .recipe import ExtractedRecipe, ExtractedIngredient, ExtractedStep
from .durations import parse_duration
from .jsonld import find_jsonld_recipe
from .microdata import find_microdata_recipe
from .normalize import normalize_recipe
from .extractor import extract_recipe, locate_recipe

__all__ = [
    "RawRecipe", "ExtractedRecipe", "ExtractedIngredient", "ExtractedStep",
    "parse_duration", "find_jsonld_recipe", "find_microdata_recipe",
    "normalize_recipe", "extract_recipe", "locate_recipe",
]
