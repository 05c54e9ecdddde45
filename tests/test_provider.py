"""
Tests for provider.py - pre-computed verb data and the provider/local split.
"""

import pytest

from katachi.constructions import Construction
from katachi.engine import conjugate
from katachi.features import Aspect, FeatureState, Tense, Tier, Voice
from katachi.models import VerbData
from katachi.provider import PROVIDER_PATHS, chart_construction, lookup_provided, provider_path


@pytest.fixture
def verb_data():
    """Provider payload as it arrives over the wire."""
    return VerbData.model_validate({
        "valid": True,
        "verb": "書く",
        "verbType": "godan-ku",
        "negative": False,
        "conjugations": {
            "tenses": {
                "time": {
                    "present": {"english": "I write", "japanese": "書く", "alts": []},
                    "past": {"english": "I wrote", "japanese": "PROVIDED-PAST", "alts": []},
                },
                "aspect": {
                    "progressive": {"english": "I am writing", "japanese": "PROVIDED-PROGRESSIVE"},
                },
                "modals": {
                    "potential": {"english": "I can write", "japanese": "PROVIDED-POTENTIAL"},
                },
            },
            "voice": {
                "passive": {"english": "It is written", "japanese": "PROVIDED-PASSIVE"},
            },
        },
    })


class TestProviderPaths:
    """Tests for the construction -> chart path map."""

    @pytest.mark.parametrize("name,path", [
        ("simple present", ("time", "present")),
        ("past", ("time", "past")),
        ("continuous", ("aspect", "progressive")),
        ("conditional", ("mood", "conditional")),
        ("volitional", ("mood", "volitional")),
        ("imperative", ("mood", "imperative")),
        ("desiderative", ("desire", "subject")),
        ("deontic", ("modals", "deontic")),
        ("potential", ("modals", "potential")),
        ("causative", ("modals", "causative")),
        ("passive", ("voice", "passive")),
    ])
    def test_paths(self, name, path):
        assert PROVIDER_PATHS[name] == path

    def test_negation_ignored(self):
        assert provider_path(Construction.parse("past negative")) == ("time", "past")
        assert provider_path(Construction.parse("negative volitional")) == ("mood", "volitional")

    def test_unmapped(self):
        assert provider_path(Construction.parse("past continuous")) is None

    def test_chart_construction(self):
        assert chart_construction("simple present", True).name == "negative"
        assert chart_construction("past", True).name == "past negative"
        assert chart_construction("continuous", True).name == "negative continuous"
        assert chart_construction("te", True).name == "negative te"
        assert chart_construction("imperative", True) is None
        assert chart_construction("past", False).name == "past"


class TestLookupProvided:
    """Tests for lookup_provided()."""

    def test_hit(self, verb_data):
        assert lookup_provided(verb_data, Construction.parse("past"), Tier.CASUAL) == "PROVIDED-PAST"

    def test_no_data(self):
        assert lookup_provided(None, Construction.parse("past"), Tier.CASUAL) is None

    def test_voice_is_never_provided(self, verb_data):
        assert lookup_provided(verb_data, Construction.parse("passive"), Tier.CASUAL) is None

    def test_negation_mismatch(self, verb_data):
        assert lookup_provided(verb_data, Construction.parse("past negative"), Tier.CASUAL) is None

    def test_missing_polite_chart(self, verb_data):
        assert lookup_provided(verb_data, Construction.parse("past"), Tier.POLITE) is None

    def test_missing_entry(self, verb_data):
        assert lookup_provided(verb_data, Construction.parse("conditional"), Tier.CASUAL) is None

    def test_invalid_data(self, verb_data):
        verb_data.valid = False
        assert lookup_provided(verb_data, Construction.parse("past"), Tier.CASUAL) is None


class TestDualPath:
    """The engine prefers provider data unless a voice is active."""

    def test_provider_used_without_voice(self, verb_data):
        result = conjugate("書く", FeatureState(tense=Tense.PAST), verb_data=verb_data)
        assert result.surface_form == "PROVIDED-PAST"
        assert result.source == "provider"

    def test_local_derivation_with_voice(self, verb_data):
        result = conjugate("書く", FeatureState(voices={Voice.POTENTIAL}), verb_data=verb_data)
        assert result.surface_form == "書ける"
        assert result.source == "rules"

    def test_local_derivation_when_not_charted(self, verb_data):
        result = conjugate("書く", FeatureState(tense=Tense.PAST, aspects={Aspect.CONTINUOUS}), verb_data=verb_data)
        assert result.surface_form == "書いていた"
        assert result.source == "rules"

    def test_polite_falls_back_to_rules(self, verb_data):
        result = conjugate("書く", FeatureState(tense=Tense.PAST), "polite", verb_data=verb_data)
        assert result.surface_form == "書きました"

    def test_field_names_accepted(self):
        data = VerbData(verb="書く", verb_type="godan-ku")
        assert data.verb_type == "godan-ku"
