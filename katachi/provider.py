"""
Lookups into pre-computed verb data.

A verb-data provider sends a chart (VerbData) of named forms. The engine uses
a chart cell when one exists for the requested construction and falls back
to its own derivation otherwise. Voice constructions are always derived
locally.
"""

import logging
from dataclasses import replace
from typing import Dict, Optional, Tuple

from katachi.constructions import Construction
from katachi.features import Tier
from katachi.models import Conjugations, VerbData

logger = logging.getLogger(__name__)

# Chart layout: category -> form -> construction name (without negation)
CHART_LAYOUT: Dict[str, Dict[str, str]] = {
    "time": {
        "present": "simple present",
        "past": "past",
    },
    "aspect": {
        "progressive": "continuous",
        "perfect": "completion",
        "resultant": "resultant",
    },
    "mood": {
        "conditional": "conditional",
        "volitional": "volitional",
        "imperative": "imperative",
        "te": "te",
    },
    "modals": {
        "potential": "potential",
        "causative": "causative",
        "deontic": "deontic",
    },
    "desire": {
        "subject": "desiderative",
    },
    "voice": {
        "passive": "passive",
    },
}

# Construction name -> (category, form)
PROVIDER_PATHS: Dict[str, Tuple[str, str]] = {
    name: (category, form)
    for category, forms in CHART_LAYOUT.items()
    for form, name in forms.items()
}

# Negated chart cells for standalone moods
NEGATED_NAMES = {
    "volitional": "negative volitional",
    "te": "negative te",
}


def chart_construction(name: str, negative: bool) -> Optional[Construction]:
    """
    The construction a chart cell holds.

    Returns:
        The Construction, or None for a cell with no negative form
        (negative imperative).
    """
    if not negative:
        return Construction.parse(name)
    if name in NEGATED_NAMES:
        return Construction.parse(NEGATED_NAMES[name])
    if name == "imperative":
        return None
    return replace(Construction.parse(name), negative=True)


def provider_path(construction: Construction) -> Optional[Tuple[str, str]]:
    """Chart path for a construction, ignoring negation."""
    positive = Construction(
        past=construction.past,
        voices=construction.voices,
        aspects=construction.aspects,
        moods=construction.moods,
        standalone=construction.standalone,
    )
    return PROVIDER_PATHS.get(positive.name)


def lookup_provided(verb_data: Optional[VerbData], construction: Construction, tier: Tier) -> Optional[str]:
    """
    Look up a pre-computed form.

    Args:
        verb_data: Provider chart, or None.
        construction: Requested construction.
        tier: Formality tier.

    Returns:
        The chart's form, or None when the engine should derive it itself.
    """
    if verb_data is None or not verb_data.valid:
        return None
    if construction.voices:
        return None
    if construction.negative != verb_data.negative:
        logger.debug(f"Chart negation does not match {construction.name!r}")
        return None

    path = provider_path(construction)
    if path is None:
        return None

    chart: Optional[Conjugations] = (
        verb_data.polite_conjugations if Tier(tier) is Tier.POLITE else verb_data.conjugations
    )
    if chart is None:
        logger.debug(f"No {Tier(tier).value} chart for {verb_data.verb!r}")
        return None

    entry = chart.get(*path)
    if entry is None or not entry.japanese:
        logger.debug(f"Chart has no {'.'.join(path)} for {verb_data.verb!r}")
        return None
    return entry.japanese
