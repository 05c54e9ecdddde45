"""
Stem transformer.

Applies a pattern recipe to a dictionary-form verb:

    verb[:-1] + base allomorph + suffix

The base allomorph depends on the recipe's base category and the verb's
inflection class. Ichidan verbs take a fixed ending for the hypothetical,
te, past and imperative bases.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from katachi.classifier import I_ROW, TE_ROOTS, InflectionClass

logger = logging.getLogger(__name__)


class BaseCategory(str, Enum):
    DICTIONARY = "Dictionary"
    STEM = "Continuative / Stem"
    NEGATIVE_STEM = "Irrealis / Imperfective"
    HYPOTHETICAL = "Hypothetical"
    TE_FORM = "T Form"
    PAST_FORM = "Modified T"
    IMPERATIVE = "Imperative"


NO_ROOTS: Tuple[str, ...] = ('',) * len(InflectionClass)

# Ichidan endings for the bases that do not read from the roots
ICHIDAN_ENDINGS = {
    BaseCategory.HYPOTHETICAL: 'れ',
    BaseCategory.TE_FORM: 'て',
    BaseCategory.PAST_FORM: 'た',
    BaseCategory.IMPERATIVE: 'ろ',
}


@dataclass(frozen=True)
class Recipe:
    """
    How to build one construction from a dictionary-form verb.

    Attributes:
        base: Which stem the construction attaches to.
        roots: Root allomorph per inflection class.
        suffix: Ending appended after the root.
    """
    base: BaseCategory
    roots: Tuple[str, ...] = NO_ROOTS
    suffix: str = ""

    def __post_init__(self):
        if len(self.roots) != len(InflectionClass):
            raise ValueError(f"Recipe needs {len(InflectionClass)} roots, got {len(self.roots)}")

    def with_suffix(self, suffix: str) -> "Recipe":
        return Recipe(self.base, self.roots, suffix)


TE_RECIPE = Recipe(BaseCategory.TE_FORM, TE_ROOTS)


def derive_base(verb: str, cls: InflectionClass, recipe: Recipe) -> str:
    """
    Build the stem a recipe's suffix attaches to.

    Args:
        verb: Dictionary form.
        cls: Inflection class of verb.
        recipe: Recipe supplying the base category and roots.

    Returns:
        The verb with its final mora replaced by the class's root.
    """
    cls = InflectionClass(cls)
    if recipe.base is BaseCategory.DICTIONARY:
        return verb

    stem = verb[:-1]
    if recipe.base is BaseCategory.STEM:
        return stem + I_ROW[cls]
    if recipe.base is BaseCategory.NEGATIVE_STEM:
        return stem + recipe.roots[cls]
    if cls.is_ichidan:
        return stem + ICHIDAN_ENDINGS[recipe.base]
    return stem + recipe.roots[cls]


def apply_pattern(verb: str, cls: InflectionClass, recipe: Optional[Recipe]) -> str:
    """
    Apply a recipe to a verb.

    Args:
        verb: Dictionary form.
        cls: Inflection class of verb.
        recipe: Recipe to apply, or None for a construction with no pattern.

    Returns:
        The conjugated form, or verb unchanged if there is no recipe.
    """
    if recipe is None:
        logger.debug(f"No recipe for {verb!r}, returning it unchanged")
        return verb
    return derive_base(verb, cls, recipe) + recipe.suffix


def te_form(verb: str, cls: InflectionClass) -> str:
    """Te form of verb (書く -> 書いて, 食べる -> 食べて)."""
    return apply_pattern(verb, cls, TE_RECIPE)
