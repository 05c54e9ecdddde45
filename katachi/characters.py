"""
Character handling for Katachi.

Provides the kana tables the classifier and the pattern tables are built on:
character classes, vowel rows, and simple script tests for verb input.
"""

import re
from typing import Dict, FrozenSet, Optional

# ============================================================================
# Kana Character Tables
# ============================================================================

# Main kana table: romanized class -> hiragana, katakana
KANA_CHARACTERS = {
    "a": "あア",     "i": "いイ",     "u": "うウ",     "e": "えエ",     "o": "おオ",
    "ka": "かカ",    "ki": "きキ",    "ku": "くク",    "ke": "けケ",    "ko": "こコ",
    "sa": "さサ",    "shi": "しシ",   "su": "すス",    "se": "せセ",    "so": "そソ",
    "ta": "たタ",    "chi": "ちチ",   "tsu": "つツ",   "te": "てテ",    "to": "とト",
    "na": "なナ",    "ni": "にニ",    "nu": "ぬヌ",    "ne": "ねネ",    "no": "のノ",
    "ha": "はハ",    "hi": "ひヒ",    "fu": "ふフ",    "he": "へヘ",    "ho": "ほホ",
    "ma": "まマ",    "mi": "みミ",    "mu": "むム",    "me": "めメ",    "mo": "もモ",
    "ya": "やヤ",                     "yu": "ゆユ",                     "yo": "よヨ",
    "ra": "らラ",    "ri": "りリ",    "ru": "るル",    "re": "れレ",    "ro": "ろロ",
    "wa": "わワ",    "wi": "ゐヰ",                     "we": "ゑヱ",    "wo": "をヲ",
    "n": "んン",
    # Voiced consonants (dakuten)
    "ga": "がガ",    "gi": "ぎギ",    "gu": "ぐグ",    "ge": "げゲ",    "go": "ごゴ",
    "za": "ざザ",    "ji": "じジ",    "zu": "ずズ",    "ze": "ぜゼ",    "zo": "ぞゾ",
    "da": "だダ",    "dji": "ぢヂ",   "dzu": "づヅ",   "de": "でデ",    "do": "どド",
    "ba": "ばバ",    "bi": "びビ",    "bu": "ぶブ",    "be": "べベ",    "bo": "ぼボ",
    "pa": "ぱパ",    "pi": "ぴピ",    "pu": "ぷプ",    "pe": "ぺペ",    "po": "ぽポ",
}

# Build character -> class mapping
CHAR_CLASS_HASH: Dict[str, str] = {}
for char_class, chars in KANA_CHARACTERS.items():
    for char in chars:
        CHAR_CLASS_HASH[char] = char_class


def get_char_class(char: str) -> str:
    """
    Get the character class for a kana character.

    Args:
        char: A single character.

    Returns:
        Character class name (e.g., 'ka', 'shi') or the character itself.
    """
    return CHAR_CLASS_HASH.get(char, char)


def get_vowel(char: str) -> Optional[str]:
    """
    Get the vowel row of a kana character.

    Returns:
        One of 'a', 'i', 'u', 'e', 'o', or None for ん and non-kana.
    """
    cc = get_char_class(char)
    if cc == char or cc == "n":
        return None
    return cc[-1]


# Vowel rows of the mora that marks a vowel-stem (ichidan) verb before the final る
ICHIDAN_VOWELS: FrozenSet[str] = frozenset({"i", "e"})

# Final characters a dictionary-form verb can end in
VERB_ENDINGS = "うつるくぐむぬぶす"

# ============================================================================
# Regular Expressions
# ============================================================================

JAPANESE_REGEX = r"[ぁ-ゟ゠-ヿ一-龯]"

_JAPANESE_PATTERN = re.compile(JAPANESE_REGEX)


# ============================================================================
# Character Testing Functions
# ============================================================================

def is_japanese(text: str) -> bool:
    """Check if text contains at least one hiragana, katakana or kanji character."""
    return bool(_JAPANESE_PATTERN.search(text))


def has_verb_ending(word: str) -> bool:
    """Check if word ends with one of the nine dictionary-form verb endings."""
    return bool(word) and word[-1] in VERB_ENDINGS
