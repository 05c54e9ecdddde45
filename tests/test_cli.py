"""
Tests for cli.py - Command line interface.
"""

import json

import pytest

from katachi.cli import main, validate_verb


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'katachi' in captured.out
        assert '0.1.0' in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'Katachi' in captured.out or 'conjugation' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1  # Should fail without input


class TestCLIValidation:
    """Tests for input validation."""

    def test_romaji_rejected(self, capsys):
        result = main(['taberu'])
        assert result == 1
        captured = capsys.readouterr()
        assert 'Error:' in captured.err

    def test_non_verb_rejected(self, capsys):
        result = main(['食べた'])
        assert result == 1
        assert 'verb ending' in capsys.readouterr().err

    def test_validate_verb(self):
        assert validate_verb('食べる') is None
        assert validate_verb('来る') is None
        assert validate_verb('') is not None

    def test_unknown_choice(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['食べる', '--voice', 'benefactive'])
        assert exc_info.value.code == 2


class TestCLIConjugation:
    """Tests for conjugation output."""

    def test_default(self, capsys):
        result = main(['食べる'])
        assert result == 0
        out = capsys.readouterr().out
        assert 'construction: simple present' in out
        assert 'casual: 食べる' in out

    def test_past_negative(self, capsys):
        assert main(['食べる', '--past', '--negative']) == 0
        out = capsys.readouterr().out
        assert '食べなかった' in out
        assert "I didn't verb" in out

    def test_voice_and_aspect(self, capsys):
        assert main(['書く', '--voice', 'causative', '--voice', 'passive', '--aspect', 'continuous']) == 0
        assert '書かせられている' in capsys.readouterr().out

    def test_formality(self, capsys):
        assert main(['書く', '--formality', 'polite']) == 0
        assert 'polite: 書きます' in capsys.readouterr().out

    def test_mood_and_modifier(self, capsys):
        assert main(['書く', '--modifier', 'conditional']) == 0
        assert '書けば' in capsys.readouterr().out

    def test_te_mood_clears_voice(self, capsys):
        assert main(['書く', '--voice', 'passive', '--mood', 'te']) == 0
        out = capsys.readouterr().out
        assert 'construction: te' in out
        assert '書いて' in out

    def test_person(self, capsys):
        assert main(['書く', '--past', '--person', 'third']) == 0
        assert 'They verbed' in capsys.readouterr().out

    def test_grid(self, capsys):
        assert main(['飲む', '--past', '--grid']) == 0
        out = capsys.readouterr().out
        assert '飲んだ' in out
        assert '飲みました' in out

    def test_json(self, capsys):
        assert main(['する', '--negative', '--json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['surface_form'] == 'しない'
        assert data['source'] == 'irregular'

    def test_chart(self, capsys):
        assert main(['話す', '--chart']) == 0
        out = capsys.readouterr().out
        assert 'time.past: 話した' in out

    def test_negative_chart(self, capsys):
        assert main(['話す', '--chart', '--negative']) == 0
        out = capsys.readouterr().out
        assert 'time.past: 話さなかった' in out
        assert 'mood.imperative' not in out

    def test_chart_json_polite(self, capsys):
        assert main(['話す', '--chart', '--json', '--formality', 'formal']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['verbType'] == 'godan-su'
        assert data['politeConjugations']['tenses']['time']['present']['japanese'] == '話します'
