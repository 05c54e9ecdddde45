"""
Tests for transform.py and patterns.py - recipes and compiled pattern tables.
"""

import pytest

from katachi.classifier import A_ROW, E_ROW, TA_ROOTS, TE_ROOTS, InflectionClass, classify
from katachi.constructions import ALL_CONSTRUCTIONS, Construction, is_reachable
from katachi.features import Formality, Tier
from katachi.patterns import (
    CASUAL_TAILS,
    POLITE_TAILS,
    auxiliary_chain,
    compile_recipe,
    get_pattern,
    get_pattern_table,
)
from katachi.transform import BaseCategory, Recipe, apply_pattern, derive_base, te_form


def conj(verb: str, name: str, formality: Formality = Formality.CASUAL) -> str:
    construction = Construction.parse(name)
    return apply_pattern(verb, classify(verb), get_pattern(construction, formality))


class TestApplyPattern:
    """Tests for the stem transformer."""

    def test_dictionary(self):
        recipe = Recipe(BaseCategory.DICTIONARY)
        assert apply_pattern("食べる", InflectionClass.RU_ICHIDAN, recipe) == "食べる"

    def test_stem(self):
        recipe = Recipe(BaseCategory.STEM, suffix="ます")
        assert apply_pattern("書く", InflectionClass.KU, recipe) == "書きます"
        assert apply_pattern("食べる", InflectionClass.RU_ICHIDAN, recipe) == "食べます"

    def test_negative_stem(self):
        recipe = Recipe(BaseCategory.NEGATIVE_STEM, A_ROW, "ない")
        assert apply_pattern("買う", InflectionClass.U, recipe) == "買わない"
        assert apply_pattern("食べる", InflectionClass.RU_ICHIDAN, recipe) == "食べない"

    def test_hypothetical(self):
        recipe = Recipe(BaseCategory.HYPOTHETICAL, E_ROW, "ば")
        assert apply_pattern("読む", InflectionClass.MU, recipe) == "読めば"
        assert apply_pattern("食べる", InflectionClass.RU_ICHIDAN, recipe) == "食べれば"

    @pytest.mark.parametrize("verb,cls,expected", [
        ("買う", InflectionClass.U, "買って"),
        ("待つ", InflectionClass.TSU, "待って"),
        ("作る", InflectionClass.RU_GODAN, "作って"),
        ("書く", InflectionClass.KU, "書いて"),
        ("泳ぐ", InflectionClass.GU, "泳いで"),
        ("読む", InflectionClass.MU, "読んで"),
        ("死ぬ", InflectionClass.NU, "死んで"),
        ("遊ぶ", InflectionClass.BU, "遊んで"),
        ("話す", InflectionClass.SU, "話して"),
        ("食べる", InflectionClass.RU_ICHIDAN, "食べて"),
    ])
    def test_te_form(self, verb, cls, expected):
        assert te_form(verb, cls) == expected

    def test_past_form(self):
        recipe = Recipe(BaseCategory.PAST_FORM, TA_ROOTS)
        assert apply_pattern("泳ぐ", InflectionClass.GU, recipe) == "泳いだ"
        assert apply_pattern("食べる", InflectionClass.RU_ICHIDAN, recipe) == "食べた"

    def test_imperative(self):
        recipe = Recipe(BaseCategory.IMPERATIVE, E_ROW)
        assert apply_pattern("書く", InflectionClass.KU, recipe) == "書け"
        assert apply_pattern("食べる", InflectionClass.RU_ICHIDAN, recipe) == "食べろ"

    def test_missing_recipe_returns_verb(self):
        assert apply_pattern("書く", InflectionClass.KU, None) == "書く"

    def test_recipe_needs_ten_roots(self):
        with pytest.raises(ValueError):
            Recipe(BaseCategory.NEGATIVE_STEM, ("わ", "た"))

    def test_derive_base_accepts_int_class(self):
        assert derive_base("書く", 3, Recipe(BaseCategory.TE_FORM, TE_ROOTS)) == "書いて"


class TestTails:
    """Tests for the tense, negation and mood tables."""

    def test_tiers_cover_same_constructions(self):
        assert set(CASUAL_TAILS) == set(POLITE_TAILS)

    def test_tail_names_are_canonical(self):
        for name in CASUAL_TAILS:
            assert Construction.parse(name).name == name

    @pytest.mark.parametrize("name,expected", [
        ("simple present", "食べる"),
        ("negative", "食べない"),
        ("past", "食べた"),
        ("past negative", "食べなかった"),
        ("conditional", "食べれば"),
        ("past conditional", "食べたら"),
        ("desiderative", "食べたい"),
        ("past negative desiderative", "食べたくなかった"),
        ("deontic", "食べるべきだ"),
        ("conditional desiderative", "食べたければ"),
        ("te", "食べて"),
        ("negative te", "食べないで"),
        ("volitional", "食べよう"),
        ("negative volitional", "食べるまい"),
        ("imperative", "食べろ"),
    ])
    def test_casual_ichidan(self, name, expected):
        assert conj("食べる", name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("simple present", "書く"),
        ("negative", "書かない"),
        ("past", "書いた"),
        ("conditional", "書けば"),
        ("volitional", "書こう"),
        ("imperative", "書け"),
    ])
    def test_casual_godan(self, name, expected):
        assert conj("書く", name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("simple present", "書きます"),
        ("negative", "書きません"),
        ("past", "書きました"),
        ("past negative", "書きませんでした"),
        ("desiderative", "書きたいです"),
        ("deontic", "書くべきです"),
        ("te", "書きまして"),
        ("volitional", "書きましょう"),
        ("imperative", "書いてください"),
    ])
    def test_polite(self, name, expected):
        assert conj("書く", name, Formality.POLITE) == expected

    def test_standard_and_formal_share_tables(self):
        assert conj("読む", "past", Formality.STANDARD) == conj("読む", "past", Formality.CASUAL)
        assert conj("読む", "past", Formality.FORMAL) == conj("読む", "past", Formality.POLITE)


class TestCompoundPatterns:
    """Tests for voice and aspect chains."""

    @pytest.mark.parametrize("verb,name,expected", [
        ("書く", "potential", "書ける"),
        ("食べる", "potential", "食べられる"),
        ("書く", "past negative potential", "書けなかった"),
        ("書く", "passive", "書かれる"),
        ("買う", "passive", "買われる"),
        ("食べる", "passive", "食べられる"),
        ("書く", "causative", "書かせる"),
        ("食べる", "causative", "食べさせる"),
        ("書く", "causative passive", "書かせられる"),
        ("食べる", "continuous", "食べている"),
        ("読む", "past continuous", "読んでいた"),
        ("書く", "completion", "書いてしまう"),
        ("書く", "past completion", "書いてしまった"),
        ("書く", "negative completion", "書いてしまわない"),
        ("書く", "resultant", "書いてある"),
        ("書く", "negative resultant", "書いてない"),
        ("書く", "completion continuous", "書いてしまっている"),
        ("書く", "passive continuous", "書かれている"),
        ("書く", "past causative continuous", "書かせていた"),
        ("書く", "potential completion", "書けてしまう"),
        ("書く", "potential conditional", "書ければ"),
        ("書く", "causative desiderative", "書かせたい"),
        ("書く", "continuous deontic", "書いているべきだ"),
        ("食べる", "continuous conditional desiderative", "食べていたければ"),
        ("書く", "passive continuous conditional deontic", "書かれているべきなら"),
        ("書く", "resultant conditional desiderative", "書いてありたければ"),
    ])
    def test_casual(self, verb, name, expected):
        assert conj(verb, name) == expected

    @pytest.mark.parametrize("verb,name,expected", [
        ("書く", "potential", "書けます"),
        ("書く", "past passive", "書かれました"),
        ("食べる", "continuous", "食べています"),
        ("書く", "completion", "書いてしまいます"),
        ("書く", "resultant", "書いてあります"),
        ("書く", "negative causative continuous", "書かせていません"),
        ("食べる", "continuous conditional desiderative", "食べていたいのでしたら"),
        ("書く", "past negative continuous conditional deontic", "書いているべきではなかったのでしたら"),
    ])
    def test_polite(self, verb, name, expected):
        assert conj(verb, name, Formality.POLITE) == expected


class TestPatternTables:
    """Tests for the compiled tables."""

    @pytest.mark.parametrize("tier", list(Tier))
    def test_table_is_total(self, tier):
        table = get_pattern_table(tier)
        assert set(table) == set(ALL_CONSTRUCTIONS)

    @pytest.mark.parametrize("tier", list(Tier))
    def test_unreachable_constructions_absent(self, tier):
        table = get_pattern_table(tier)
        for construction, recipe in table.items():
            if not is_reachable(construction):
                assert recipe is None, construction.name

    @pytest.mark.parametrize("tier", list(Tier))
    def test_reachable_constructions_defined(self, tier):
        table = get_pattern_table(tier)
        missing = [c.name for c, r in table.items() if is_reachable(c) and r is None]
        assert missing == []

    def test_unreachable_returns_verb_unchanged(self):
        assert conj("書く", "potential passive") == "書く"

    def test_auxiliary_chain(self):
        assert auxiliary_chain(Construction.parse("causative continuous"), Tier.CASUAL) == "せている"
        assert auxiliary_chain(Construction.parse("negative resultant"), Tier.POLITE) == "ありません"
        assert auxiliary_chain(Construction.parse("past"), Tier.CASUAL) == ""
        assert auxiliary_chain(Construction.parse("potential passive"), Tier.CASUAL) is None

    def test_compile_recipe_unreachable(self):
        assert compile_recipe(Construction.parse("passive completion"), Tier.CASUAL) is None

    def test_casual_and_polite_differ(self):
        verbs = ["書く", "食べる", "話す"]
        for construction in ALL_CONSTRUCTIONS:
            casual = get_pattern(construction, Formality.CASUAL)
            polite = get_pattern(construction, Formality.POLITE)
            if casual is None or polite is None:
                continue
            for verb in verbs:
                cls = classify(verb)
                assert apply_pattern(verb, cls, casual) != apply_pattern(verb, cls, polite), construction.name
