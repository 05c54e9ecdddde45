"""
Grammatical feature state for conjugation requests.

A FeatureState is an immutable record of the toggles a learner has selected:
person, tense, voice, aspect, mood and negation. Every transform returns a new
state; no state is shared between requests.

Toggle rules, applied in this order:
    1. Person and tense always keep exactly one member selected; clicking the
       active member is ignored.
    2. Selecting a base mood clears every other mood flag. The te mood also
       resets person and tense and clears voice and aspect.
    3. Potential clears passive, causative and continuous.
    4. Continuous clears resultant and potential; resultant clears continuous.
    5. The forbidden-combination sweep (see sweep()).
    6. Toggling any non-mood axis while te is active resets the mood to plain.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple, Union


class InvalidFeatureState(ValueError):
    """Raised for a FeatureState that breaks the model's structural contract."""


# ============================================================================
# Axes and values
# ============================================================================

class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Tense(str, Enum):
    SIMPLE = "simple"
    PAST = "past"


class Voice(str, Enum):
    POTENTIAL = "potential"
    PASSIVE = "passive"
    CAUSATIVE = "causative"


class Aspect(str, Enum):
    CONTINUOUS = "continuous"
    COMPLETION = "completion"
    RESULTANT = "resultant"


class Mood(str, Enum):
    PLAIN = "plain"
    TE = "te"
    VOLITIONAL = "volitional"
    IMPERATIVE = "imperative"
    DEONTIC = "deontic"
    DESIDERATIVE = "desiderative"
    CONDITIONAL = "conditional"


class Axis(str, Enum):
    PERSON = "person"
    TENSE = "tense"
    VOICE = "voice"
    ASPECT = "aspect"
    MOOD = "mood"
    MODIFIER = "modifier"
    NEGATIVE = "negative"


# Moods that can also stack on plain as secondary modifiers
MOOD_MODIFIERS: FrozenSet[Mood] = frozenset({Mood.CONDITIONAL, Mood.DESIDERATIVE, Mood.DEONTIC})


class Tier(str, Enum):
    """Pattern table a formality level reads from."""
    CASUAL = "casual"
    POLITE = "polite"


class Formality(str, Enum):
    CASUAL = "casual"
    STANDARD = "standard"
    POLITE = "polite"
    FORMAL = "formal"

    @property
    def tier(self) -> Tier:
        if self in (Formality.POLITE, Formality.FORMAL):
            return Tier.POLITE
        return Tier.CASUAL


# ============================================================================
# Feature state
# ============================================================================

@dataclass(frozen=True)
class FeatureState:
    """
    Normalized selection of grammatical features.

    Attributes:
        person: Selected person (exactly one).
        tense: Selected tense (exactly one).
        voices: Active voice flags.
        aspects: Active aspect flags.
        mood: Base mood (exactly one).
        modifiers: Secondary mood modifiers stacked on the plain mood.
        negative: Negation flag.
    """
    person: Person = Person.FIRST
    tense: Tense = Tense.SIMPLE
    voices: FrozenSet[Voice] = field(default_factory=frozenset)
    aspects: FrozenSet[Aspect] = field(default_factory=frozenset)
    mood: Mood = Mood.PLAIN
    modifiers: FrozenSet[Mood] = field(default_factory=frozenset)
    negative: bool = False

    def __post_init__(self):
        try:
            object.__setattr__(self, "person", Person(self.person))
            object.__setattr__(self, "tense", Tense(self.tense))
            object.__setattr__(self, "mood", Mood(self.mood))
            object.__setattr__(self, "voices", frozenset(Voice(v) for v in self.voices))
            object.__setattr__(self, "aspects", frozenset(Aspect(a) for a in self.aspects))
            object.__setattr__(self, "modifiers", frozenset(Mood(m) for m in self.modifiers))
        except (ValueError, TypeError) as e:
            raise InvalidFeatureState(f"Invalid feature value: {e}") from e

        if not isinstance(self.negative, bool):
            raise InvalidFeatureState(f"negative must be a bool, got {self.negative!r}")
        if not self.modifiers <= MOOD_MODIFIERS:
            raise InvalidFeatureState(f"Not a mood modifier: {sorted(self.modifiers - MOOD_MODIFIERS)}")
        if self.modifiers and self.mood is not Mood.PLAIN:
            raise InvalidFeatureState("Mood modifiers require the plain base mood")

    @property
    def is_past(self) -> bool:
        return self.tense is Tense.PAST

    def has_mood(self, mood: Mood) -> bool:
        """True if mood is the base mood or an active modifier."""
        return self.mood is mood or mood in self.modifiers


DEFAULT_STATE = FeatureState()


# ============================================================================
# Forbidden combinations
# ============================================================================

def _clear_deontic(state: FeatureState) -> FeatureState:
    if state.mood is Mood.DEONTIC:
        return replace(state, mood=Mood.PLAIN)
    return replace(state, modifiers=state.modifiers - {Mood.DEONTIC})


def sweep(state: FeatureState) -> FeatureState:
    """
    Clear flags that form a forbidden combination.

    Rules run in order; each clears its lower-priority flag:
        a. completion + passive -> passive
        b. completion + causative -> causative
        c. potential + continuous -> continuous
        d. completion + passive + continuous -> continuous
        e. completion + causative + passive + continuous -> continuous
        f. completion + potential + continuous + deontic -> deontic
    """
    voices = set(state.voices)
    aspects = set(state.aspects)

    if Aspect.COMPLETION in aspects and Voice.PASSIVE in voices:
        voices.discard(Voice.PASSIVE)
    if Aspect.COMPLETION in aspects and Voice.CAUSATIVE in voices:
        voices.discard(Voice.CAUSATIVE)
    if Voice.POTENTIAL in voices and Aspect.CONTINUOUS in aspects:
        aspects.discard(Aspect.CONTINUOUS)
    if {Aspect.COMPLETION, Aspect.CONTINUOUS} <= aspects and Voice.PASSIVE in voices:
        aspects.discard(Aspect.CONTINUOUS)
    if {Aspect.COMPLETION, Aspect.CONTINUOUS} <= aspects and {Voice.CAUSATIVE, Voice.PASSIVE} <= voices:
        aspects.discard(Aspect.CONTINUOUS)

    result = replace(state, voices=frozenset(voices), aspects=frozenset(aspects))
    if ({Aspect.COMPLETION, Aspect.CONTINUOUS} <= aspects and Voice.POTENTIAL in voices
            and result.has_mood(Mood.DEONTIC)):
        result = _clear_deontic(result)
    return result


def normalize(state: FeatureState) -> FeatureState:
    """
    Bring a directly built state into the form toggles would have produced.

    Applies the te-mood reset, voice and aspect exclusivity (potential and
    continuous win their pairs) and the forbidden-combination sweep.
    """
    if state.mood is Mood.TE:
        state = replace(state, person=Person.FIRST, tense=Tense.SIMPLE,
                        voices=frozenset(), aspects=frozenset())

    voices = set(state.voices)
    aspects = set(state.aspects)
    if Voice.POTENTIAL in voices:
        voices -= {Voice.PASSIVE, Voice.CAUSATIVE}
    if Aspect.CONTINUOUS in aspects:
        aspects.discard(Aspect.RESULTANT)
    state = replace(state, voices=frozenset(voices), aspects=frozenset(aspects))
    return sweep(state)


# ============================================================================
# Toggles
# ============================================================================

def _toggle_mood(state: FeatureState, mood: Mood) -> FeatureState:
    if state.mood is mood and not state.modifiers:
        # The only active mood; the click is ignored
        return state

    state = replace(state, mood=mood, modifiers=frozenset())
    if mood is Mood.TE:
        state = replace(state, person=Person.FIRST, tense=Tense.SIMPLE,
                        voices=frozenset(), aspects=frozenset())
    return sweep(state)


def _toggle_modifier(state: FeatureState, mood: Mood) -> FeatureState:
    if mood not in MOOD_MODIFIERS:
        raise ValueError(f"{mood.value!r} is not a mood modifier")
    if state.mood is not Mood.PLAIN:
        return state
    return sweep(replace(state, modifiers=state.modifiers ^ {mood}))


def _toggle_voice(state: FeatureState, voice: Voice) -> FeatureState:
    voices = set(state.voices)
    aspects = set(state.aspects)

    if voice in voices:
        voices.discard(voice)
    else:
        if voice is Voice.POTENTIAL:
            voices -= {Voice.PASSIVE, Voice.CAUSATIVE}
            aspects.discard(Aspect.CONTINUOUS)
        else:
            voices.discard(Voice.POTENTIAL)
        voices.add(voice)

    return replace(state, voices=frozenset(voices), aspects=frozenset(aspects))


def _toggle_aspect(state: FeatureState, aspect: Aspect) -> FeatureState:
    voices = set(state.voices)
    aspects = set(state.aspects)

    if aspect in aspects:
        aspects.discard(aspect)
    else:
        if aspect is Aspect.CONTINUOUS:
            aspects.discard(Aspect.RESULTANT)
            voices.discard(Voice.POTENTIAL)
        elif aspect is Aspect.RESULTANT:
            aspects.discard(Aspect.CONTINUOUS)
        aspects.add(aspect)

    return replace(state, voices=frozenset(voices), aspects=frozenset(aspects))


def toggle(state: FeatureState, axis: Union[Axis, str], value=None) -> FeatureState:
    """
    Toggle one feature and return the normalized result.

    Args:
        state: Current state (left untouched).
        axis: Axis to act on.
        value: Axis value to toggle. Ignored for the negative axis.

    Returns:
        New normalized FeatureState.

    Raises:
        ValueError: If axis or value is not a known feature.
    """
    axis = Axis(axis)

    if axis is Axis.MOOD:
        return _toggle_mood(state, Mood(value))
    if axis is Axis.MODIFIER:
        return _toggle_modifier(state, Mood(value))

    if axis is Axis.PERSON:
        person = Person(value)
        if state.person is person:
            return state
        new = replace(state, person=person)
    elif axis is Axis.TENSE:
        tense = Tense(value)
        if state.tense is tense:
            return state
        new = replace(state, tense=tense)
    elif axis is Axis.VOICE:
        new = _toggle_voice(state, Voice(value))
    elif axis is Axis.ASPECT:
        new = _toggle_aspect(state, Aspect(value))
    else:
        new = replace(state, negative=not state.negative)

    # te is only kept while nothing else changes
    if new.mood is Mood.TE:
        new = replace(new, mood=Mood.PLAIN)

    return sweep(new)


def apply_toggles(
    toggles: Iterable[Tuple[Union[Axis, str], Optional[str]]],
    state: FeatureState = DEFAULT_STATE,
) -> FeatureState:
    """Apply a sequence of (axis, value) toggles, starting from state."""
    for axis, value in toggles:
        state = toggle(state, axis, value)
    return state
