"""
Katachi: Japanese verb conjugation engine.

Classifies dictionary-form verbs, resolves grammatical feature toggles into
named constructions and derives the inflected surface form.

Example:
    >>> from katachi import conjugate, apply_toggles
    >>> state = apply_toggles([("tense", "past"), ("negative", None)])
    >>> conjugate("食べる", state).surface_form
    '食べなかった'
"""

__version__ = "0.1.0"

from katachi.classifier import InflectionClass, classify
from katachi.constructions import ALL_CONSTRUCTIONS, Construction, resolve
from katachi.engine import build_chart, conjugate, conjugate_grid
from katachi.features import (
    DEFAULT_STATE,
    FeatureState,
    Formality,
    InvalidFeatureState,
    apply_toggles,
    toggle,
)
from katachi.irregular import lookup_irregular
from katachi.transform import apply_pattern
from katachi.translations import describe, gloss

__all__ = [
    "__version__",
    "ALL_CONSTRUCTIONS",
    "Construction",
    "DEFAULT_STATE",
    "FeatureState",
    "Formality",
    "InflectionClass",
    "InvalidFeatureState",
    "apply_pattern",
    "apply_toggles",
    "build_chart",
    "classify",
    "conjugate",
    "conjugate_grid",
    "describe",
    "gloss",
    "lookup_irregular",
    "resolve",
    "toggle",
]
