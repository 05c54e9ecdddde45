"""
Irregular verb table.

Surface forms for ある, いる, 行く, くる and する are read from
data/irregular_verbs.csv instead of being derived. Each row holds one
construction with its casual and polite cell:

    verb,construction,casual,polite

An empty cell means the form is not listed; lookups for it return None.
The engine builds unlisted voice and aspect forms from the listed heads
(させる, して, ...), so the table only needs the forms it cannot derive.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from katachi import settings
from katachi.constructions import Construction
from katachi.features import Formality, Tier

logger = logging.getLogger(__name__)

IRREGULAR_VERBS = ("ある", "いる", "行く", "くる", "する")

# Alternate spelling -> (canonical verb, replacement for the first character)
VERB_ALIASES: Dict[str, Tuple[str, str]] = {
    "来る": ("くる", "来"),
    "いく": ("行く", "い"),
}

# (verb, construction name, tier) -> surface form
_irregular_table: Optional[Dict[Tuple[str, str, Tier], str]] = None


def load_irregular_table(csv_path: Optional[Union[str, Path]] = None) -> Dict[Tuple[str, str, Tier], str]:
    """
    Load the irregular verb table from CSV.

    Args:
        csv_path: Table to read. Defaults to settings.IRREGULAR_CSV_PATH.

    Returns:
        Mapping of (verb, construction name, tier) to surface form.

    Raises:
        ValueError: If a row names an unknown construction.
    """
    path = Path(csv_path or settings.IRREGULAR_CSV_PATH)
    table: Dict[Tuple[str, str, Tier], str] = {}

    with open(path, 'r', encoding='utf-8', newline='') as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row in reader:
            if len(row) < 4 or not row[0].strip():
                continue
            verb, name, casual, polite = (cell.strip() for cell in row[:4])
            key = Construction.parse(name).name
            if casual:
                table[(verb, key, Tier.CASUAL)] = casual
            if polite:
                table[(verb, key, Tier.POLITE)] = polite

    logger.debug(f"Loaded {len(table)} irregular forms from {path}")
    return table


def get_irregular_table() -> Dict[Tuple[str, str, Tier], str]:
    """Get the irregular table, loading it on first use."""
    global _irregular_table
    if _irregular_table is None:
        _irregular_table = load_irregular_table()
    return _irregular_table


def reset_irregular_table() -> None:
    """Drop the cached table so the next lookup reloads it."""
    global _irregular_table
    _irregular_table = None


def is_irregular(verb: str) -> bool:
    """True if verb (or one of its alternate spellings) is in the table."""
    return verb in IRREGULAR_VERBS or verb in VERB_ALIASES


def lookup_irregular(
    verb: str,
    construction: Union[Construction, str],
    formality: Union[Formality, Tier, str] = Formality.CASUAL,
) -> Optional[str]:
    """
    Look up the literal form of an irregular verb.

    Args:
        verb: Dictionary form (来る and いく are accepted).
        construction: Construction or canonical construction name.
        formality: Formality level or tier.

    Returns:
        The surface form, or None if the verb is not irregular or the cell
        is not listed.
    """
    if isinstance(construction, str):
        construction = Construction.parse(construction)
    tier = _to_tier(formality)

    canonical, replacement = VERB_ALIASES.get(verb, (verb, ""))
    if canonical not in IRREGULAR_VERBS:
        return None

    form = get_irregular_table().get((canonical, construction.name, tier))
    if form is None:
        logger.debug(f"No irregular form for {verb!r} / {construction.name!r} ({tier.value})")
        return None

    if replacement:
        form = replacement + form[1:]
    return form


def _to_tier(formality: Union[Formality, Tier, str]) -> Tier:
    if isinstance(formality, Tier):
        return formality
    return Formality(formality).tier
