"""
Constructions: canonical names for grammatical feature combinations.

A Construction is the key into the pattern, irregular and translation tables.
Its name lists the active features in a fixed order:

    tense -> negation -> voice -> aspect -> mood

e.g. "past negative causative passive continuous". The empty combination is
"simple present". Volitional, imperative and te are standalone constructions
that only apply when no voice, aspect or mood modifier is active.
"""

import itertools
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from katachi.features import (
    Aspect,
    FeatureState,
    Mood,
    MOOD_MODIFIERS,
    Tense,
    Voice,
    sweep,
)

SIMPLE_PRESENT = "simple present"

# Standalone moods and their negated names. Imperative has no negative form
# of its own and shares negative volitional.
STANDALONE_NAMES: Dict[Tuple[Mood, bool], str] = {
    (Mood.TE, False): "te",
    (Mood.TE, True): "negative te",
    (Mood.VOLITIONAL, False): "volitional",
    (Mood.VOLITIONAL, True): "negative volitional",
    (Mood.IMPERATIVE, False): "imperative",
}

STANDALONE_GLOSS_KEYS = {
    "te": "T-Form",
    "negative te": "Negative T-Form",
    "volitional": "Volitional",
    "negative volitional": "Negative Volitional",
    "imperative": "Imperative",
}

# Translation keys that do not follow the token order
GLOSS_KEY_ALIASES = {
    "Past Negative": "Past-Negative",
}

# Every key carrying these tokens shares a single entry, negated or not
COMPLETION_PAST_POTENTIAL = frozenset({"past", "potential", "completion"})
COMPLETION_PAST_POTENTIAL_KEY = "Completion Past Potential"

# Allowed token groups, in canonical order
VOICE_OPTIONS: List[Tuple[Voice, ...]] = [
    (),
    (Voice.POTENTIAL,),
    (Voice.PASSIVE,),
    (Voice.CAUSATIVE,),
    (Voice.POTENTIAL, Voice.PASSIVE),
    (Voice.POTENTIAL, Voice.CAUSATIVE),
    (Voice.CAUSATIVE, Voice.PASSIVE),
]

ASPECT_OPTIONS: List[Tuple[Aspect, ...]] = [
    (),
    (Aspect.CONTINUOUS,),
    (Aspect.COMPLETION,),
    (Aspect.RESULTANT,),
    (Aspect.COMPLETION, Aspect.CONTINUOUS),
    (Aspect.COMPLETION, Aspect.RESULTANT),
    (Aspect.CONTINUOUS, Aspect.RESULTANT),
]

MOOD_OPTIONS: List[Tuple[Mood, ...]] = [
    (),
    (Mood.CONDITIONAL,),
    (Mood.DESIDERATIVE,),
    (Mood.DEONTIC,),
    (Mood.CONDITIONAL, Mood.DESIDERATIVE),
    (Mood.CONDITIONAL, Mood.DEONTIC),
]


@dataclass(frozen=True)
class Construction:
    """
    One named feature combination.

    Attributes:
        past: Past tense.
        negative: Negated.
        voices: Voice tokens in canonical order.
        aspects: Aspect tokens in canonical order.
        moods: Mood modifier tokens in canonical order.
        standalone: Te, volitional or imperative when used on their own.
    """
    past: bool = False
    negative: bool = False
    voices: Tuple[Voice, ...] = ()
    aspects: Tuple[Aspect, ...] = ()
    moods: Tuple[Mood, ...] = ()
    standalone: Optional[Mood] = None

    def tokens(self) -> List[str]:
        """Feature tokens in name order."""
        parts = []
        if self.past:
            parts.append("past")
        if self.negative:
            parts.append("negative")
        parts.extend(v.value for v in self.voices)
        parts.extend(a.value for a in self.aspects)
        parts.extend(m.value for m in self.moods)
        return parts

    @property
    def name(self) -> str:
        if self.standalone is not None:
            return STANDALONE_NAMES[(self.standalone, self.negative)]
        tokens = self.tokens()
        return " ".join(tokens) if tokens else SIMPLE_PRESENT

    @property
    def gloss_key(self) -> str:
        """
        Title-cased translation key. The empty combination has no key.
        """
        if self.standalone is not None:
            return STANDALONE_GLOSS_KEYS[self.name]
        tokens = self.tokens()
        if COMPLETION_PAST_POTENTIAL <= set(tokens):
            return COMPLETION_PAST_POTENTIAL_KEY
        key = " ".join(t.capitalize() for t in tokens)
        return GLOSS_KEY_ALIASES.get(key, key)

    def tail(self) -> "Construction":
        """The tense, negation and mood part, without voice or aspect."""
        return Construction(
            past=self.past,
            negative=self.negative,
            moods=self.moods,
            standalone=self.standalone,
        )

    def implied_state(self) -> FeatureState:
        """A FeatureState that resolves back to this construction."""
        if self.standalone is not None:
            return FeatureState(mood=self.standalone, negative=self.negative)
        return FeatureState(
            tense=Tense.PAST if self.past else Tense.SIMPLE,
            negative=self.negative,
            voices=frozenset(self.voices),
            aspects=frozenset(self.aspects),
            modifiers=frozenset(self.moods),
        )

    @classmethod
    def parse(cls, name: str) -> "Construction":
        """
        Parse a canonical construction name.

        Raises:
            ValueError: If name is not a canonical construction name.
        """
        name = " ".join(name.split()).lower()
        if name == SIMPLE_PRESENT:
            return cls()
        for (mood, negative), standalone_name in STANDALONE_NAMES.items():
            if name == standalone_name:
                return cls(negative=negative, standalone=mood)

        tokens = name.split(" ")
        past = negative = False
        if tokens and tokens[0] == "past":
            past = True
            tokens = tokens[1:]
        if tokens and tokens[0] == "negative":
            negative = True
            tokens = tokens[1:]

        voices = tuple(Voice(t) for t in tokens if t in _VOICE_TOKENS)
        aspects = tuple(Aspect(t) for t in tokens if t in _ASPECT_TOKENS)
        moods = tuple(Mood(t) for t in tokens if t in _MOOD_TOKENS)
        construction = cls(past=past, negative=negative, voices=voices, aspects=aspects, moods=moods)

        if (voices not in VOICE_OPTIONS or aspects not in ASPECT_OPTIONS
                or moods not in MOOD_OPTIONS or construction.name != name):
            raise ValueError(f"Unknown construction: {name!r}")
        return construction

    def __str__(self) -> str:
        return self.name


_VOICE_TOKENS = {v.value for v in Voice}
_ASPECT_TOKENS = {a.value for a in Aspect}
_MOOD_TOKENS = {m.value for m in MOOD_MODIFIERS}


# ============================================================================
# Resolver
# ============================================================================

def _voice_tokens(voices: FrozenSet[Voice]) -> Tuple[Voice, ...]:
    if Voice.POTENTIAL in voices and Voice.PASSIVE in voices:
        return (Voice.POTENTIAL, Voice.PASSIVE)
    if Voice.POTENTIAL in voices and Voice.CAUSATIVE in voices:
        return (Voice.POTENTIAL, Voice.CAUSATIVE)
    if Voice.CAUSATIVE in voices and Voice.PASSIVE in voices:
        return (Voice.CAUSATIVE, Voice.PASSIVE)
    for voice in (Voice.POTENTIAL, Voice.PASSIVE, Voice.CAUSATIVE):
        if voice in voices:
            return (voice,)
    return ()


def _aspect_tokens(aspects: FrozenSet[Aspect]) -> Tuple[Aspect, ...]:
    if Aspect.COMPLETION in aspects and Aspect.CONTINUOUS in aspects:
        return (Aspect.COMPLETION, Aspect.CONTINUOUS)
    if Aspect.COMPLETION in aspects and Aspect.RESULTANT in aspects:
        return (Aspect.COMPLETION, Aspect.RESULTANT)
    if Aspect.CONTINUOUS in aspects and Aspect.RESULTANT in aspects:
        return (Aspect.CONTINUOUS, Aspect.RESULTANT)
    for aspect in (Aspect.CONTINUOUS, Aspect.COMPLETION, Aspect.RESULTANT):
        if aspect in aspects:
            return (aspect,)
    return ()


def _mood_tokens(state: FeatureState) -> Tuple[Mood, ...]:
    conditional = state.has_mood(Mood.CONDITIONAL)
    desiderative = state.has_mood(Mood.DESIDERATIVE)
    deontic = state.has_mood(Mood.DEONTIC)

    if conditional and desiderative:
        return (Mood.CONDITIONAL, Mood.DESIDERATIVE)
    if conditional and deontic:
        return (Mood.CONDITIONAL, Mood.DEONTIC)
    if desiderative:
        return (Mood.DESIDERATIVE,)
    if deontic:
        return (Mood.DEONTIC,)
    if conditional:
        return (Mood.CONDITIONAL,)
    return ()


def resolve(state: FeatureState) -> Construction:
    """
    Resolve a feature state to its construction.

    Forbidden combinations are cleared first (see features.sweep), so a
    state built directly resolves the way the toggled state would.

    Args:
        state: Feature selection.

    Returns:
        The Construction naming the selected combination.
    """
    state = sweep(state)
    voices = _voice_tokens(state.voices)
    aspects = _aspect_tokens(state.aspects)
    moods = _mood_tokens(state)

    if not (voices or aspects or moods):
        if state.mood is Mood.TE:
            return Construction(negative=state.negative, standalone=Mood.TE)
        if state.mood in (Mood.VOLITIONAL, Mood.IMPERATIVE):
            if state.negative:
                return Construction(negative=True, standalone=Mood.VOLITIONAL)
            return Construction(standalone=state.mood)

    return Construction(
        past=state.is_past,
        negative=state.negative,
        voices=voices,
        aspects=aspects,
        moods=moods,
    )


def resolve_name(state: FeatureState) -> str:
    """Construction name used by the derivation tables ("simple present" when empty)."""
    return resolve(state).name


def resolve_gloss_key(state: FeatureState) -> str:
    """Translation key for a state ("" when nothing is selected)."""
    return resolve(state).gloss_key


# ============================================================================
# Construction space
# ============================================================================

def is_reachable(construction: Construction) -> bool:
    """
    True if some sequence of toggles can produce this construction.

    Pairs the feature model never lets coexist: potential with passive,
    causative or continuous; continuous with resultant; completion with
    passive or causative.
    """
    voices = set(construction.voices)
    aspects = set(construction.aspects)

    if Voice.POTENTIAL in voices and (voices & {Voice.PASSIVE, Voice.CAUSATIVE}):
        return False
    if Voice.POTENTIAL in voices and Aspect.CONTINUOUS in aspects:
        return False
    if {Aspect.CONTINUOUS, Aspect.RESULTANT} <= aspects:
        return False
    if Aspect.COMPLETION in aspects and (voices & {Voice.PASSIVE, Voice.CAUSATIVE}):
        return False
    return True


def _all_constructions() -> Tuple[Construction, ...]:
    constructions = [
        Construction(past=past, negative=negative, voices=voices, aspects=aspects, moods=moods)
        for past, negative, voices, aspects, moods in itertools.product(
            (False, True), (False, True), VOICE_OPTIONS, ASPECT_OPTIONS, MOOD_OPTIONS
        )
    ]
    constructions.extend(
        Construction(negative=negative, standalone=mood)
        for (mood, negative) in STANDALONE_NAMES
    )
    return tuple(constructions)


ALL_CONSTRUCTIONS: Tuple[Construction, ...] = _all_constructions()
