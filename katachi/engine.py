"""
Conjugation engine.

Entry points:
    conjugate(verb, state, formality)  - one form
    conjugate_grid(verb, state)        - one form at every formality level
    build_chart(verb, negative, polite) - a full VerbData chart

Surface forms come from, in order:
    1. the provider chart, when one is given and no voice is active
    2. the irregular verb table, for ある/いる/行く/くる/する
    3. classification + pattern table + stem transformer
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple, Union

from katachi import settings
from katachi.classifier import InflectionClass, classify
from katachi.constructions import Construction, resolve
from katachi.features import DEFAULT_STATE, FeatureState, Formality, Mood, Tier, normalize
from katachi.irregular import is_irregular, lookup_irregular
from katachi.models import (
    ConjugationEntry,
    ConjugationResult,
    Conjugations,
    GridResult,
    VerbData,
)
from katachi.patterns import auxiliary_chain, get_pattern
from katachi.provider import CHART_LAYOUT, chart_construction, lookup_provided
from katachi.transform import apply_pattern
from katachi.translations import describe, personalize

logger = logging.getLogger(__name__)

IRREGULAR = "irregular"
PROVIDER = "provider"
RULES = "rules"


def derive_irregular(
    verb: str,
    construction: Construction,
    formality: Union[Formality, str] = Formality.CASUAL,
) -> str:
    """
    Surface form of an irregular verb.

    Listed cells are used as they are. Unlisted voice forms continue from the
    listed voiced dictionary form (させる, こられる, ...), which inflects as an
    ichidan verb. Unlisted aspect forms attach the auxiliary chain to the
    listed te form (して, きて, ...).

    Returns:
        The surface form, or "" when the construction has no pattern.
    """
    formality = Formality(formality)
    form = lookup_irregular(verb, construction, formality)
    if form is not None:
        return form

    if get_pattern(construction, formality) is None:
        logger.warning(f"No {formality.value} pattern for {construction.name!r} of {verb!r}")
        return ""

    if construction.voices:
        voiced = Construction(voices=construction.voices)
        head = lookup_irregular(verb, voiced)
        if head is None:
            head = apply_pattern(verb, classify(verb), get_pattern(voiced))
        rest = replace(construction, voices=())
        return apply_pattern(head, InflectionClass.RU_ICHIDAN, get_pattern(rest, formality))

    te = lookup_irregular(verb, Construction(standalone=Mood.TE))
    chain = auxiliary_chain(construction, formality.tier)
    if not (construction.aspects and te and chain):
        logger.warning(f"No irregular form for {verb!r} / {construction.name!r} ({formality.value})")
        return ""
    return te + chain


def derive(
    verb: str,
    construction: Construction,
    formality: Union[Formality, str] = Formality.CASUAL,
    verb_data: Optional[VerbData] = None,
) -> Tuple[str, str]:
    """
    Derive the surface form of a construction.

    Args:
        verb: Dictionary form.
        construction: Construction to build.
        formality: Formality level.
        verb_data: Optional provider chart.

    Returns:
        Tuple of (surface form, source). The surface form is empty for an
        irregular verb and a construction with no pattern.
    """
    formality = Formality(formality)

    provided = lookup_provided(verb_data, construction, formality.tier)
    if provided is not None:
        return provided, PROVIDER

    if is_irregular(verb):
        return derive_irregular(verb, construction, formality), IRREGULAR

    cls = classify(verb)
    recipe = get_pattern(construction, formality)
    if recipe is None:
        logger.warning(f"No {formality.value} pattern for {construction.name!r}, returning {verb!r} unchanged")
    return apply_pattern(verb, cls, recipe), RULES


def verb_type(verb: str) -> str:
    """Inflection class label, or 'irregular'."""
    if is_irregular(verb):
        return IRREGULAR
    return classify(verb).label


def _check_verb(verb: str) -> str:
    if verb is None or not verb.strip():
        raise ValueError("Verb must be a non-empty string")
    return verb.strip()


def conjugate(
    verb: str,
    state: FeatureState = DEFAULT_STATE,
    formality: Union[Formality, str, None] = None,
    verb_data: Optional[VerbData] = None,
) -> ConjugationResult:
    """
    Conjugate a verb for a feature state.

    Args:
        verb: Dictionary form in Japanese script.
        state: Selected features. A state built directly is normalized
            the way toggles would have left it.
        formality: Formality level. Defaults to settings.DEFAULT_FORMALITY.
        verb_data: Optional provider chart for this verb.

    Returns:
        ConjugationResult with construction, surface form and gloss.

    Raises:
        ValueError: If verb is empty or formality is unknown.

    Example:
        >>> conjugate("食べる").surface_form
        '食べる'
    """
    verb = _check_verb(verb)
    formality = Formality(formality or settings.DEFAULT_FORMALITY)

    state = normalize(state)
    construction = resolve(state)
    surface_form, source = derive(verb, construction, formality, verb_data)

    return ConjugationResult(
        verb=verb,
        construction=construction.name,
        surface_form=surface_form,
        gloss=personalize(describe(construction), state.person),
        formality=formality.value,
        verb_type=verb_type(verb),
        source=source,
    )


def conjugate_grid(
    verb: str,
    state: FeatureState = DEFAULT_STATE,
    verb_data: Optional[VerbData] = None,
) -> GridResult:
    """
    Conjugate a verb at all four formality levels.

    Casual and standard read the casual pattern table; polite and formal
    read the polite one.
    """
    results = [conjugate(verb, state, formality, verb_data) for formality in Formality]
    return GridResult.from_results(results)


# ============================================================================
# Charts
# ============================================================================

def _chart(verb: str, negative: bool, tier: Tier) -> Conjugations:
    chart = Conjugations()
    formality = Formality.POLITE if tier is Tier.POLITE else Formality.CASUAL

    for category, forms in CHART_LAYOUT.items():
        for form, name in forms.items():
            construction = chart_construction(name, negative)
            if construction is None:
                continue
            japanese, _ = derive(verb, construction, formality)
            alts = []
            if name == "conditional":
                # たら conditional
                alt, _ = derive(verb, Construction(past=True, negative=negative, moods=construction.moods), formality)
                alts.append(alt)
            chart.set(category, form, ConjugationEntry(
                english=describe(construction),
                japanese=japanese,
                alts=[a for a in alts if a],
            ))
    return chart


def build_chart(verb: str, negative: bool = False, polite: bool = False) -> VerbData:
    """
    Build a provider-shaped chart from the local engine.

    Args:
        verb: Dictionary form.
        negative: Chart negated forms.
        polite: Also chart the polite forms.

    Returns:
        VerbData for verb.

    Raises:
        ValueError: If verb is empty.
    """
    verb = _check_verb(verb)
    logger.debug(f"Building chart for {verb!r} (negative={negative}, polite={polite})")

    return VerbData(
        verb=verb,
        verb_type=verb_type(verb),
        negative=negative,
        conjugations=_chart(verb, negative, Tier.CASUAL),
        polite_conjugations=_chart(verb, negative, Tier.POLITE) if polite else None,
    )
