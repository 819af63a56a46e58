"""Tests for utils/parsers.py: command prefix matching and argument parsing."""

import pytest

from utils.parsers import match_command, parse_choice_index, parse_suggestion


class TestMatchCommand:
    def test_start(self):
        assert match_command("/start") == ("start", "")

    def test_prefix_match_is_literal(self):
        # Leading token only, no word boundary
        assert match_command("/startnow")[0] == "start"
        assert match_command("/pick2") == ("pick", "2")

    def test_suggest_keeps_argument(self):
        assert match_command("/suggest  Beer ") == ("suggest", "  Beer ")

    def test_case_sensitive(self):
        assert match_command("/START") == (None, "")
        assert match_command("/Pick 1") == (None, "")

    def test_showchoices_exact_only(self):
        assert match_command("/showchoices") == ("showchoices", "")
        assert match_command("/showchoices now") == (None, "")
        assert match_command(" /showchoices") == (None, "")

    def test_unknown_text(self):
        assert match_command("hello") == (None, "")
        assert match_command("") == (None, "")
        assert match_command(None) == (None, "")

    def test_command_must_lead(self):
        assert match_command("please /pick 1") == (None, "")


class TestParseSuggestion:
    def test_trims(self):
        assert parse_suggestion("  Gin Tonic \t") == "Gin Tonic"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_blank_is_none(self, raw):
        assert parse_suggestion(raw) is None


class TestParseChoiceIndex:
    def test_plain(self):
        assert parse_choice_index(" 3 ") == 3

    def test_signs(self):
        assert parse_choice_index("+2") == 2
        assert parse_choice_index("-1") == -1

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "1 2", "two", "1_000"])
    def test_invalid(self, raw):
        assert parse_choice_index(raw) is None

    def test_oversized_number_is_invalid(self):
        assert parse_choice_index("9" * 5000) is None
