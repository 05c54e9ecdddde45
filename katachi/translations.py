"""
English glosses for constructions.

Glosses come from data/translations.csv, keyed by title-cased construction
names ("Past Negative Potential"). The table is hand-maintained, so lookups
tolerate stray whitespace, case differences and the "Conitional" spelling
some keys use. Constructions the table does not list get a gloss composed
from their features (see compose_gloss()).
"""

import csv
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from katachi import settings
from katachi.constructions import Construction
from katachi.features import Aspect, Mood, Person, Voice

logger = logging.getLogger(__name__)

# Spelling variant found in the translation data
SPELLING_VARIANTS = {"conditional": "conitional"}

OPTION_SEPARATOR = '", "'

_translations: Optional[Dict[str, str]] = None
_normalized: Optional[Dict[str, str]] = None


def load_translations(csv_path: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """
    Load the translation table from CSV.

    Args:
        csv_path: Table to read. Defaults to settings.TRANSLATIONS_CSV_PATH.

    Returns:
        Mapping of translation key to raw gloss text.
    """
    path = Path(csv_path or settings.TRANSLATIONS_CSV_PATH)
    table: Dict[str, str] = {}

    with open(path, 'r', encoding='utf-8', newline='') as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row in reader:
            if len(row) >= 2 and row[0]:
                table[row[0]] = row[1]

    logger.debug(f"Loaded {len(table)} translations from {path}")
    return table


def get_translations() -> Dict[str, str]:
    """Get the translation table, loading it on first use."""
    global _translations, _normalized
    if _translations is None:
        _translations = load_translations()
        _normalized = {normalize_key(k): v for k, v in _translations.items()}
    return _translations


def reset_translations() -> None:
    """Drop the cached table so the next lookup reloads it."""
    global _translations, _normalized
    _translations = None
    _normalized = None


def normalize_key(key: str) -> str:
    """Lowercase, collapse whitespace and fold spelling variants."""
    key = " ".join(key.split()).lower()
    for word, variant in SPELLING_VARIANTS.items():
        key = key.replace(word, variant)
    return key


def find_translation(key: str) -> Optional[str]:
    """
    Find the raw gloss for a key.

    Tries an exact match, then the trimmed key, then a normalized match.

    Returns:
        Raw gloss text, or None if nothing matches.
    """
    table = get_translations()
    if key in table:
        return table[key]

    trimmed = key.strip()
    if trimmed in table:
        return table[trimmed]

    return _normalized.get(normalize_key(key))


def clean_translation(raw: str) -> str:
    """
    Pick the display text out of a raw gloss.

    Entries with alternatives are stored as '"first", "second"'; the first
    option is used.
    """
    text = raw.strip()
    if OPTION_SEPARATOR in text:
        text = text.split(OPTION_SEPARATOR)[0]
    return text.strip('"').strip()


def gloss(key: str) -> str:
    """
    Get the English gloss for a translation key.

    Args:
        key: Title-cased key (Construction.gloss_key). May be empty.

    Returns:
        The gloss, or settings.FALLBACK_GLOSS if the key has no entry.
    """
    raw = find_translation(key) if key else None
    if raw is None:
        logger.debug(f"No translation for {key!r}, using fallback")
        return settings.FALLBACK_GLOSS
    return clean_translation(raw)


# ============================================================================
# Composed glosses
# ============================================================================
# The table covers the common constructions. Any other combination is glossed
# by building the English verb phrase inside out: voice, then aspects, then
# desiderative or deontic, then tense and negation on the outermost verb.

# Lemma -> (past, past participle, present participle)
VERB_FORMS: Dict[str, Tuple[str, str, str]] = {
    "verb": ("verbed", "verbed", "verbing"),
    "be": ("was", "been", "being"),
    "make": ("made", "made", "making"),
    "have": ("had", "had", "having"),
    "end": ("ended", "ended", "ending"),
    "want": ("wanted", "wanted", "wanting"),
}


@dataclass(frozen=True)
class Phrase:
    """
    An English verb phrase.

    Attributes:
        head: Lemma of the leading verb, or a modal ("can", "should").
        rest: Words after the head.
        inner: Phrase a modal governs.
    """
    head: str
    rest: str = ""
    inner: Optional["Phrase"] = None


CORE = Phrase("verb")

VOICE_PHRASES: Dict[Tuple[Voice, ...], Phrase] = {
    (): CORE,
    (Voice.POTENTIAL,): Phrase("can", inner=CORE),
    (Voice.PASSIVE,): Phrase("be", "verbed"),
    (Voice.CAUSATIVE,): Phrase("make", "someone verb"),
    (Voice.CAUSATIVE, Voice.PASSIVE): Phrase("be", "made to verb"),
}


def _words(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def _base(phrase: Phrase) -> str:
    return _words(phrase.head, phrase.rest)


def _participle(phrase: Phrase) -> str:
    return _words(VERB_FORMS[phrase.head][1], phrase.rest)


def _ing(phrase: Phrase) -> str:
    return _words(VERB_FORMS[phrase.head][2], phrase.rest)


def _plain(phrase: Phrase) -> Phrase:
    # "can" has no infinitive or participle
    if phrase.head == "can":
        return Phrase("be", _words("able to", _base(phrase.inner)))
    return phrase


def _with_aspect(phrase: Phrase, aspect: Aspect) -> Phrase:
    phrase = _plain(phrase)
    if aspect is Aspect.CONTINUOUS:
        return Phrase("be", _ing(phrase))
    if aspect is Aspect.COMPLETION:
        return Phrase("end", _words("up", _ing(phrase)))
    if phrase == CORE:
        return Phrase("have", "it verbed")
    return Phrase("have", _participle(phrase))


def _finite(phrase: Phrase, past: bool, negative: bool) -> str:
    """Conjugate the head of a phrase for "I"."""
    if phrase.head == "can":
        if past:
            word = "couldn't" if negative else "could"
        else:
            word = "can't" if negative else "can"
        return _words(word, _base(phrase.inner))

    if phrase.head == "should":
        word = "shouldn't" if negative else "should"
        if past:
            return _words(word, "have", _participle(phrase.inner))
        return _words(word, _base(phrase.inner))

    if phrase.head == "be":
        if past:
            word = "wasn't" if negative else "was"
        else:
            word = "am not" if negative else "am"
        return _words(word, phrase.rest)

    if negative:
        return _words("didn't" if past else "don't", _base(phrase))
    return _words(VERB_FORMS[phrase.head][0] if past else phrase.head, phrase.rest)


def compose_gloss(construction: Construction) -> Optional[str]:
    """
    Build a first-person gloss from a construction's features.

    Returns:
        The gloss, or None for a standalone mood or a voice combination
        with no English phrasing.
    """
    if construction.standalone is not None:
        return None
    phrase = VOICE_PHRASES.get(construction.voices)
    if phrase is None:
        return None

    for aspect in construction.aspects:
        phrase = _with_aspect(phrase, aspect)
    for mood in construction.moods:
        if mood is Mood.DESIDERATIVE:
            phrase = Phrase("want", _words("to", _base(_plain(phrase))))
        elif mood is Mood.DEONTIC:
            phrase = Phrase("should", inner=_plain(phrase))

    sentence = _words("I", _finite(phrase, construction.past, construction.negative))
    if Mood.CONDITIONAL in construction.moods:
        sentence = f"If {sentence}"
    return sentence


def describe(construction: Construction) -> str:
    """
    Get the English gloss for a construction.

    Uses the table entry for its gloss key when there is one and composes
    the gloss otherwise. The empty combination has no key and gets
    settings.FALLBACK_GLOSS.
    """
    key = construction.gloss_key
    if not key:
        return settings.FALLBACK_GLOSS

    raw = find_translation(key)
    if raw is not None:
        return clean_translation(raw)

    composed = compose_gloss(construction)
    if composed is None:
        logger.debug(f"No translation for {key!r}, using fallback")
        return settings.FALLBACK_GLOSS
    return composed


# ============================================================================
# Person
# ============================================================================

PRONOUNS = {
    Person.FIRST: ("I", "am", "was"),
    Person.SECOND: ("You", "are", "were"),
    Person.THIRD: ("They", "are", "were"),
}

_SUBJECT_PATTERN = re.compile(r"\bI\b(?: (am|was)(?=n't\b|\b))?")


def personalize(text: str, person: Union[Person, str] = Person.FIRST) -> str:
    """
    Rewrite a first-person gloss for another person.

    "I was verbing" -> "You were verbing" / "They were verbing".
    """
    person = Person(person)
    if person is Person.FIRST:
        return text

    pronoun, present, past = PRONOUNS[person]

    def replace(match):
        subject = pronoun if match.start() == 0 else pronoun.lower()
        verb = match.group(1)
        if verb == "am":
            return f"{subject} {present}"
        if verb == "was":
            return f"{subject} {past}"
        return subject

    return _SUBJECT_PATTERN.sub(replace, text)
