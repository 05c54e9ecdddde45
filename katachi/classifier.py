"""
Inflection classification for Japanese verbs.

Maps a dictionary-form verb to one of ten inflection classes: the nine
consonant-stem (godan) classes and the vowel-stem (ichidan) class.

Class order (also the index order of every per-class root array):
    0  - う  (godan)
    1  - つ  (godan)
    2  - る  (godan)
    3  - く  (godan)
    4  - ぐ  (godan)
    5  - む  (godan)
    6  - ぬ  (godan)
    7  - ぶ  (godan)
    8  - す  (godan)
    9  - る  (ichidan, い/え-row + る)
"""

import logging
from enum import IntEnum
from typing import Dict, Tuple

from katachi.characters import ICHIDAN_VOWELS, get_vowel

logger = logging.getLogger(__name__)


class InflectionClass(IntEnum):
    """Inflection class IDs, in root-array order."""
    U = 0
    TSU = 1
    RU_GODAN = 2
    KU = 3
    GU = 4
    MU = 5
    NU = 6
    BU = 7
    SU = 8
    RU_ICHIDAN = 9

    @property
    def is_ichidan(self) -> bool:
        return self is InflectionClass.RU_ICHIDAN

    @property
    def label(self) -> str:
        return CLASS_LABELS[self]


CLASS_LABELS = {
    InflectionClass.U: "godan-u",
    InflectionClass.TSU: "godan-tsu",
    InflectionClass.RU_GODAN: "godan-ru",
    InflectionClass.KU: "godan-ku",
    InflectionClass.GU: "godan-gu",
    InflectionClass.MU: "godan-mu",
    InflectionClass.NU: "godan-nu",
    InflectionClass.BU: "godan-bu",
    InflectionClass.SU: "godan-su",
    InflectionClass.RU_ICHIDAN: "ichidan",
}

# Final mora -> class. る maps to godan here; the lookback decides ichidan.
ENDING_TO_CLASS: Dict[str, InflectionClass] = {
    'う': InflectionClass.U,
    'つ': InflectionClass.TSU,
    'る': InflectionClass.RU_GODAN,
    'く': InflectionClass.KU,
    'ぐ': InflectionClass.GU,
    'む': InflectionClass.MU,
    'ぬ': InflectionClass.NU,
    'ぶ': InflectionClass.BU,
    'す': InflectionClass.SU,
}

# ============================================================================
# Per-class root allomorphs
# ============================================================================
# Each tuple is indexed by InflectionClass. The ichidan slot holds the root
# ichidan verbs take in the same position (usually nothing).

A_ROW: Tuple[str, ...] = ('わ', 'た', 'ら', 'か', 'が', 'ま', 'な', 'ば', 'さ', '')
I_ROW: Tuple[str, ...] = ('い', 'ち', 'り', 'き', 'ぎ', 'み', 'に', 'び', 'し', '')
E_ROW: Tuple[str, ...] = ('え', 'て', 'れ', 'け', 'げ', 'め', 'ね', 'べ', 'せ', '')
O_ROW: Tuple[str, ...] = ('お', 'と', 'ろ', 'こ', 'ご', 'も', 'の', 'ぼ', 'そ', '')

# Te-form and past-form sound changes (onbin)
TE_ROOTS: Tuple[str, ...] = ('って', 'って', 'って', 'いて', 'いで', 'んで', 'んで', 'んで', 'して', '')
TA_ROOTS: Tuple[str, ...] = ('った', 'った', 'った', 'いた', 'いだ', 'んだ', 'んだ', 'んだ', 'した', '')


def classify(verb: str) -> InflectionClass:
    """
    Classify a dictionary-form verb by inflection class.

    Verbs ending in る are ichidan when the preceding mora is in the
    い/え rows, godan otherwise. Single-character verbs have no preceding
    mora and are godan by definition. Unknown endings fall back to godan-ru.

    Args:
        verb: Verb in dictionary form, native script.

    Returns:
        The verb's InflectionClass.
    """
    if not verb:
        logger.warning("Cannot classify empty verb, defaulting to godan-ru")
        return InflectionClass.RU_GODAN

    last = verb[-1]
    if last == 'る' and len(verb) > 1:
        if get_vowel(verb[-2]) in ICHIDAN_VOWELS:
            return InflectionClass.RU_ICHIDAN
        return InflectionClass.RU_GODAN

    cls = ENDING_TO_CLASS.get(last)
    if cls is None:
        logger.warning(f"Unclassifiable verb ending {last!r} in {verb!r}, defaulting to godan-ru")
        return InflectionClass.RU_GODAN
    return cls
