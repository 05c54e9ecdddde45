"""
Command line interface for katachi.

Usage:
    python -m katachi.cli 食べる                       # casual form
    python -m katachi.cli 食べる --past --negative     # 食べなかった
    python -m katachi.cli 書く --voice causative --grid # all formality levels
    python -m katachi.cli 書く --chart --json          # full chart as JSON

Feature flags are applied as toggles, in the order --past, --negative,
--person, --voice, --aspect, --mood, --modifier, so the same rules that
govern interactive toggling apply here.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from katachi import __version__, settings
from katachi.characters import has_verb_ending, is_japanese
from katachi.engine import build_chart, conjugate, conjugate_grid
from katachi.features import (
    Aspect,
    Axis,
    DEFAULT_STATE,
    FeatureState,
    Formality,
    MOOD_MODIFIERS,
    Mood,
    Person,
    Tier,
    Voice,
    apply_toggles,
)
from katachi.irregular import is_irregular


def validate_verb(verb: str) -> Optional[str]:
    """
    Check that input looks like a dictionary-form verb.

    Returns:
        An error message, or None if the verb is acceptable.
    """
    if not verb:
        return "No verb given"
    if not is_japanese(verb):
        return f"{verb!r} is not written in Japanese script"
    if not (has_verb_ending(verb) or is_irregular(verb)):
        return f"{verb!r} does not end in a dictionary-form verb ending"
    return None


def build_state(parsed: argparse.Namespace) -> FeatureState:
    """Turn parsed flags into a FeatureState by toggling from the default."""
    toggles: List[Tuple[Axis, Optional[str]]] = []

    if parsed.past:
        toggles.append((Axis.TENSE, "past"))
    if parsed.negative:
        toggles.append((Axis.NEGATIVE, None))
    if parsed.person:
        toggles.append((Axis.PERSON, parsed.person))
    for voice in parsed.voice or []:
        toggles.append((Axis.VOICE, voice))
    for aspect in parsed.aspect or []:
        toggles.append((Axis.ASPECT, aspect))
    if parsed.mood:
        toggles.append((Axis.MOOD, parsed.mood))
    for modifier in parsed.modifier or []:
        toggles.append((Axis.MODIFIER, modifier))

    return apply_toggles(toggles, DEFAULT_STATE)


def format_result_text(result) -> str:
    lines = [
        f"{result.verb} ({result.verb_type})",
        f"construction: {result.construction}",
        f"gloss: {result.gloss}",
        f"{result.formality}: {result.surface_form}",
    ]
    return '\n'.join(lines)


def format_grid_text(grid) -> str:
    lines = [
        f"{grid.verb} ({grid.verb_type})",
        f"construction: {grid.construction}",
        f"gloss: {grid.gloss}",
    ]
    for formality, form in grid.cells.items():
        lines.append(f"{formality:>8}: {form}")
    return '\n'.join(lines)


def format_chart_text(data) -> str:
    lines = [f"{data.verb} ({data.verb_type})"]
    charts = [("casual", data.conjugations)]
    if data.polite_conjugations is not None:
        charts.append(("polite", data.polite_conjugations))

    for label, chart in charts:
        lines.append('')
        lines.append(f"[{label}]")
        groups = list(chart.tenses.items()) + [("voice", chart.voice)]
        for category, forms in groups:
            for form, entry in forms.items():
                alts = f" ({', '.join(entry.alts)})" if entry.alts else ""
                lines.append(f"  {category}.{form}: {entry.japanese}{alts}  {entry.english}")
    return '\n'.join(lines)


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Command line interface for Katachi (Japanese verb conjugation)',
        prog='katachi',
    )

    parser.add_argument(
        'verb',
        nargs='?',
        help='Verb in dictionary form (e.g. 食べる)',
    )

    parser.add_argument(
        '--past',
        action='store_true',
        help='Past tense',
    )

    parser.add_argument(
        '-n', '--negative',
        action='store_true',
        help='Negative',
    )

    parser.add_argument(
        '-p', '--person',
        choices=[p.value for p in Person],
        help='Person used in the gloss (default: first)',
    )

    parser.add_argument(
        '--voice',
        action='append',
        choices=[v.value for v in Voice],
        help='Voice (repeatable)',
    )

    parser.add_argument(
        '--aspect',
        action='append',
        choices=[a.value for a in Aspect],
        help='Aspect (repeatable)',
    )

    parser.add_argument(
        '-m', '--mood',
        choices=[m.value for m in Mood],
        help='Base mood (default: plain)',
    )

    parser.add_argument(
        '--modifier',
        action='append',
        choices=sorted(m.value for m in MOOD_MODIFIERS),
        help='Mood modifier stacked on the plain mood (repeatable)',
    )

    parser.add_argument(
        '-F', '--formality',
        choices=[f.value for f in Formality],
        default=None,
        help=f'Formality level (default: {settings.DEFAULT_FORMALITY})',
    )

    parser.add_argument(
        '-g', '--grid',
        action='store_true',
        help='Show every formality level',
    )

    parser.add_argument(
        '-c', '--chart',
        action='store_true',
        help='Show the full conjugation chart (honours --negative)',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Output JSON',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'katachi {__version__}')
        return 0

    if not parsed.verb:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.WARNING),
        format='%(levelname)s %(name)s: %(message)s',
    )

    verb = parsed.verb.strip()
    error = validate_verb(verb)
    if error:
        print(f'Error: {error}', file=sys.stderr)
        return 1

    try:
        if parsed.chart:
            polite = parsed.formality is not None and Formality(parsed.formality).tier is Tier.POLITE
            data = build_chart(verb, negative=parsed.negative, polite=polite)
            if parsed.json:
                print(json.dumps(data.model_dump(by_alias=True), ensure_ascii=False, indent=2))
            else:
                print(format_chart_text(data))
            return 0

        state = build_state(parsed)

        if parsed.grid:
            result = conjugate_grid(verb, state)
            output = format_grid_text(result)
        else:
            result = conjugate(verb, state, parsed.formality)
            output = format_result_text(result)

        if parsed.json:
            print(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))
        else:
            print(output)
        return 0

    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
