"""
Pattern tables.

One recipe table per formality tier, covering every Construction. Tables are
compiled from three smaller pieces:

    TAILS      - tense, negation and mood endings for a plain verb
    VOICES     - irrealis roots plus the ichidan auxiliary each voice produces
    ASPECTS    - the auxiliary verb each aspect attaches after the te form

A compound construction is built as

    head (voice roots, or te-form roots) + te forms of the inner auxiliaries
    + the tail conjugation of the last auxiliary

e.g. past causative continuous: 書か + せて + いた.
"""

import logging
from typing import Dict, Optional, Tuple

from katachi.classifier import (
    A_ROW,
    E_ROW,
    O_ROW,
    TA_ROOTS,
    TE_ROOTS,
    InflectionClass,
)
from katachi.constructions import ALL_CONSTRUCTIONS, Construction, is_reachable
from katachi.features import Aspect, Formality, Tier, Voice
from katachi.irregular import lookup_irregular
from katachi.transform import BaseCategory, Recipe, TE_RECIPE, apply_pattern, te_form

logger = logging.getLogger(__name__)

DICTIONARY = BaseCategory.DICTIONARY
STEM = BaseCategory.STEM
NEGATIVE_STEM = BaseCategory.NEGATIVE_STEM
HYPOTHETICAL = BaseCategory.HYPOTHETICAL
TE_FORM = BaseCategory.TE_FORM
PAST_FORM = BaseCategory.PAST_FORM
IMPERATIVE = BaseCategory.IMPERATIVE


def _with_ichidan(roots: Tuple[str, ...], ending: str) -> Tuple[str, ...]:
    return roots[:InflectionClass.RU_ICHIDAN] + (ending,)


VOLITIONAL_ROOTS = _with_ichidan(O_ROW, 'よ')
POTENTIAL_ROOTS = _with_ichidan(E_ROW, 'られ')
PASSIVE_ROOTS = _with_ichidan(A_ROW, 'ら')
CAUSATIVE_ROOTS = _with_ichidan(A_ROW, 'さ')


# ============================================================================
# Tails
# ============================================================================

CASUAL_TAILS: Dict[str, Recipe] = {
    "simple present": Recipe(DICTIONARY),
    "negative": Recipe(NEGATIVE_STEM, A_ROW, 'ない'),
    "past": Recipe(PAST_FORM, TA_ROOTS),
    "past negative": Recipe(NEGATIVE_STEM, A_ROW, 'なかった'),

    "conditional": Recipe(HYPOTHETICAL, E_ROW, 'ば'),
    "negative conditional": Recipe(NEGATIVE_STEM, A_ROW, 'なければ'),
    "past conditional": Recipe(PAST_FORM, TA_ROOTS, 'ら'),
    "past negative conditional": Recipe(NEGATIVE_STEM, A_ROW, 'なかったら'),

    "desiderative": Recipe(STEM, suffix='たい'),
    "negative desiderative": Recipe(STEM, suffix='たくない'),
    "past desiderative": Recipe(STEM, suffix='たかった'),
    "past negative desiderative": Recipe(STEM, suffix='たくなかった'),

    "deontic": Recipe(DICTIONARY, suffix='べきだ'),
    "negative deontic": Recipe(DICTIONARY, suffix='べきではない'),
    "past deontic": Recipe(DICTIONARY, suffix='べきだった'),
    "past negative deontic": Recipe(DICTIONARY, suffix='べきではなかった'),

    "conditional desiderative": Recipe(STEM, suffix='たければ'),
    "negative conditional desiderative": Recipe(STEM, suffix='たくなければ'),
    "past conditional desiderative": Recipe(STEM, suffix='たかったら'),
    "past negative conditional desiderative": Recipe(STEM, suffix='たくなかったら'),

    "conditional deontic": Recipe(DICTIONARY, suffix='べきなら'),
    "negative conditional deontic": Recipe(DICTIONARY, suffix='べきでないなら'),
    "past conditional deontic": Recipe(DICTIONARY, suffix='べきだったら'),
    "past negative conditional deontic": Recipe(DICTIONARY, suffix='べきでなかったら'),

    "te": TE_RECIPE,
    "negative te": Recipe(NEGATIVE_STEM, A_ROW, 'ないで'),
    "volitional": Recipe(NEGATIVE_STEM, VOLITIONAL_ROOTS, 'う'),
    "negative volitional": Recipe(DICTIONARY, suffix='まい'),
    "imperative": Recipe(IMPERATIVE, E_ROW),
}

POLITE_TAILS: Dict[str, Recipe] = {
    "simple present": Recipe(STEM, suffix='ます'),
    "negative": Recipe(STEM, suffix='ません'),
    "past": Recipe(STEM, suffix='ました'),
    "past negative": Recipe(STEM, suffix='ませんでした'),

    "conditional": Recipe(STEM, suffix='ますなら'),
    "negative conditional": Recipe(STEM, suffix='ませんなら'),
    "past conditional": Recipe(STEM, suffix='ましたら'),
    "past negative conditional": Recipe(STEM, suffix='ませんでしたら'),

    "desiderative": Recipe(STEM, suffix='たいです'),
    "negative desiderative": Recipe(STEM, suffix='たくないです'),
    "past desiderative": Recipe(STEM, suffix='たかったです'),
    "past negative desiderative": Recipe(STEM, suffix='たくなかったです'),

    "deontic": Recipe(DICTIONARY, suffix='べきです'),
    "negative deontic": Recipe(DICTIONARY, suffix='べきではありません'),
    "past deontic": Recipe(DICTIONARY, suffix='べきでした'),
    "past negative deontic": Recipe(DICTIONARY, suffix='べきではありませんでした'),

    "conditional desiderative": Recipe(STEM, suffix='たいのでしたら'),
    "negative conditional desiderative": Recipe(STEM, suffix='たくないのでしたら'),
    "past conditional desiderative": Recipe(STEM, suffix='たかったのでしたら'),
    "past negative conditional desiderative": Recipe(STEM, suffix='たくなかったのでしたら'),

    "conditional deontic": Recipe(DICTIONARY, suffix='べきなのでしたら'),
    "negative conditional deontic": Recipe(DICTIONARY, suffix='べきではないのでしたら'),
    "past conditional deontic": Recipe(DICTIONARY, suffix='べきだったのでしたら'),
    "past negative conditional deontic": Recipe(DICTIONARY, suffix='べきではなかったのでしたら'),

    "te": Recipe(STEM, suffix='まして'),
    "negative te": Recipe(STEM, suffix='ませんで'),
    "volitional": Recipe(STEM, suffix='ましょう'),
    "negative volitional": Recipe(STEM, suffix='ますまい'),
    "imperative": Recipe(TE_FORM, TE_ROOTS, 'ください'),
}

TAILS: Dict[Tier, Dict[str, Recipe]] = {
    Tier.CASUAL: CASUAL_TAILS,
    Tier.POLITE: POLITE_TAILS,
}


# ============================================================================
# Voice and aspect layers
# ============================================================================

# Voice tokens -> (irrealis roots, ichidan auxiliary)
VOICES: Dict[Tuple[Voice, ...], Tuple[Tuple[str, ...], str]] = {
    (Voice.POTENTIAL,): (POTENTIAL_ROOTS, 'る'),
    (Voice.PASSIVE,): (PASSIVE_ROOTS, 'れる'),
    (Voice.CAUSATIVE,): (CAUSATIVE_ROOTS, 'せる'),
    (Voice.CAUSATIVE, Voice.PASSIVE): (CAUSATIVE_ROOTS, 'せられる'),
}

# Aspect -> (auxiliary verb, its inflection class)
ASPECTS: Dict[Aspect, Tuple[str, InflectionClass]] = {
    Aspect.CONTINUOUS: ('いる', InflectionClass.RU_ICHIDAN),
    Aspect.COMPLETION: ('しまう', InflectionClass.U),
    Aspect.RESULTANT: ('ある', InflectionClass.RU_GODAN),
}

# ある negates to ない, so it reads its tails from the irregular table
IRREGULAR_AUXILIARIES = frozenset({'ある'})


def _conjugate_auxiliary(aux: str, cls: InflectionClass, tail_name: str, tier: Tier) -> Optional[str]:
    if aux in IRREGULAR_AUXILIARIES:
        return lookup_irregular(aux, tail_name, tier)
    return apply_pattern(aux, cls, TAILS[tier][tail_name])


def auxiliary_chain(construction: Construction, tier: Tier) -> Optional[str]:
    """
    Conjugate the auxiliaries that follow a construction's head.

    Voice auxiliaries come first, then aspect auxiliaries. Every auxiliary
    but the last takes its te form; the last one carries the tail.

    Returns:
        The auxiliary text (empty when there is no voice or aspect), or
        None if the construction is unreachable or a piece is missing.
    """
    if not is_reachable(construction):
        return None

    tail_name = construction.tail().name
    if tail_name not in TAILS[tier]:
        return None

    chain = []
    if construction.voices:
        layer = VOICES.get(construction.voices)
        if layer is None:
            return None
        chain.append((layer[1], InflectionClass.RU_ICHIDAN))
    chain.extend(ASPECTS[aspect] for aspect in construction.aspects)
    if not chain:
        return ""

    inner = "".join(te_form(aux, cls) for aux, cls in chain[:-1])
    last_aux, last_cls = chain[-1]
    ending = _conjugate_auxiliary(last_aux, last_cls, tail_name, tier)
    if ending is None:
        return None
    return inner + ending


def compile_recipe(construction: Construction, tier: Tier) -> Optional[Recipe]:
    """
    Build the recipe for one construction.

    Args:
        construction: Construction to build.
        tier: Formality tier.

    Returns:
        The Recipe, or None if the construction is unreachable or one of
        its pieces is missing.
    """
    ending = auxiliary_chain(construction, tier)
    if ending is None:
        return None

    if construction.voices:
        roots = VOICES[construction.voices][0]
        return Recipe(NEGATIVE_STEM, roots, ending)
    if construction.aspects:
        return TE_RECIPE.with_suffix(ending)
    return TAILS[tier][construction.tail().name]


def compile_table(tier: Tier) -> Dict[Construction, Optional[Recipe]]:
    """Compile the recipe table for a tier. Every construction gets an entry."""
    table = {c: compile_recipe(c, tier) for c in ALL_CONSTRUCTIONS}
    defined = sum(1 for recipe in table.values() if recipe is not None)
    logger.debug(f"Compiled {tier.value} pattern table: {defined}/{len(table)} constructions defined")
    return table


# ============================================================================
# Lookup
# ============================================================================

_pattern_tables: Dict[Tier, Dict[Construction, Optional[Recipe]]] = {}


def get_pattern_table(tier: Tier) -> Dict[Construction, Optional[Recipe]]:
    """Get the compiled table for a tier, compiling it on first use."""
    tier = Tier(tier)
    if tier not in _pattern_tables:
        _pattern_tables[tier] = compile_table(tier)
    return _pattern_tables[tier]


def get_pattern(construction: Construction, formality: Formality = Formality.CASUAL) -> Optional[Recipe]:
    """
    Look up the recipe for a construction at a formality level.

    Returns:
        The Recipe, or None when the construction has no pattern.
    """
    return get_pattern_table(Formality(formality).tier).get(construction)
