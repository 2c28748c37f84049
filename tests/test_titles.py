"""Tests for display-title cleanup."""

from __future__ import annotations

import logging

import pytest

from catalogr.naming import (
    DEFAULT_NOISE_TOKENS,
    capitalize_first,
    collapse_repeats,
    strip_extension,
    transform_title,
)
from catalogr.schemas.rules import TitleRules


class TestStripExtension:
    """Tests for strip_extension function."""

    def test_removes_last_extension(self) -> None:
        """Only the final dot-segment is removed."""
        assert strip_extension("The.Movie.2010.mkv") == "The.Movie.2010"

    def test_no_extension(self) -> None:
        """Names without a dot are unchanged."""
        assert strip_extension("Movie") == "Movie"

    def test_dot_before_slash_is_not_extension(self) -> None:
        """A dot followed by a path separator is not an extension."""
        assert strip_extension("dir.name/file") == "dir.name/file"

    def test_trailing_dot_kept(self) -> None:
        """A trailing dot has no extension characters after it."""
        assert strip_extension("Movie.") == "Movie."


class TestCollapseRepeats:
    """Tests for collapse_repeats function."""

    def test_double_space(self) -> None:
        """Two spaces become one."""
        assert collapse_repeats("a  b") == "a b"

    def test_long_runs_collapse_fully(self) -> None:
        """Runs of any length end up single."""
        assert collapse_repeats("a      b") == "a b"
        assert collapse_repeats("x-----y") == "x-y"

    def test_multiple_runs(self) -> None:
        """Separate runs are all collapsed."""
        assert collapse_repeats("a  b  c -- d") == "a b c - d"

    def test_nothing_to_collapse(self) -> None:
        """Clean text is returned unchanged."""
        assert collapse_repeats("The Movie - 2010") == "The Movie - 2010"

    def test_edges_not_stripped(self) -> None:
        """Leading/trailing single spaces survive."""
        assert collapse_repeats("   a   ") == " a "


class TestCapitalizeFirst:
    """Tests for capitalize_first function."""

    def test_first_char_only(self) -> None:
        """Rest of the string keeps its case."""
        assert capitalize_first("the MOVIE") == "The MOVIE"

    def test_empty(self) -> None:
        """Empty string stays empty."""
        assert capitalize_first("") == ""

    def test_non_letter_first(self) -> None:
        """Non-letters are left alone."""
        assert capitalize_first(" movie") == " movie"


class TestTransformTitle:
    """Tests for transform_title with built-in rules."""

    def test_release_name(self) -> None:
        """Typical scene release name is cleaned."""
        result = transform_title("The.Movie.2010.BluRay.x264-YIFY.mkv")
        assert result == "The Movie 2010 -"
        for leftover in (".", "BluRay", "x264", "YIFY", "  "):
            assert leftover not in result

    def test_underscores_and_capitalization(self) -> None:
        """Underscores become spaces and first letter is capitalized."""
        assert transform_title("some_movie_name.avi") == "Some movie name"

    def test_tabs_become_spaces(self) -> None:
        """Tabs are replaced by spaces."""
        assert transform_title("a\tb") == "A b"

    def test_multiple_tags(self) -> None:
        """Several tags in one name are all removed."""
        assert transform_title("Star.Wars.George Lucas.DVDRip.XviD.avi") == "Star Wars "

    def test_removal_is_case_sensitive(self) -> None:
        """Tokens only match their exact case."""
        assert transform_title("movie.bluray.mkv") == "Movie bluray"

    def test_removal_is_substring_not_word(self) -> None:
        """Tokens are removed even inside words."""
        assert transform_title("Xac3Y") == "XY"

    def test_longer_token_listed_first_wins(self) -> None:
        """'XViD-EVO' is removed whole because it precedes 'XViD'."""
        assert transform_title("Film.XViD-EVO.avi") == "Film "

    def test_empty_input(self) -> None:
        """Empty input gives empty output."""
        assert transform_title("") == ""

    def test_hidden_file_name(self) -> None:
        """A name that is only an extension becomes empty."""
        assert transform_title(".hidden") == ""


class TestTitleBlacklist:
    """Tests for the track-label blacklist."""

    @pytest.mark.parametrize(
        "raw",
        [
            "English",
            "english.srt",
            "English-forced.srt",
            "English-sdh",
            "English-sdh.srt",
            "sdh",
            "Sdh-SDH",
            "spa",
            "slv",
            "Slv.srt",
        ],
    )
    def test_labels_dropped(self, raw: str) -> None:
        """Track labels come out empty."""
        assert transform_title(raw) == ""

    def test_similar_labels_kept(self) -> None:
        """Blacklist matches exact forms only."""
        assert transform_title("eng") == "Eng"
        assert transform_title("English Patient") == "English Patient"

    def test_lowercase_entry_never_matches_after_capitalization(self) -> None:
        """'subs' is capitalized before the blacklist check."""
        assert transform_title("subs") == "Subs"


class TestTransformTitleProperties:
    """Behavioral properties of transform_title."""

    def test_not_idempotent(self) -> None:
        """Cleaning can reassemble a token that a second pass removes."""
        once = transform_title("x2HD-CAM64")
        assert once == "X264"
        assert transform_title(once) == ""

    def test_deterministic(self) -> None:
        """Same input always gives the same output."""
        raw = "Some_Show.HDRip.AAC-RARBG.mp4"
        assert transform_title(raw) == transform_title(raw)


class TestCustomRules:
    """Tests for transform_title with explicit rules."""

    def test_token_order_matters(self) -> None:
        """Listing the shorter token first leaves part of the longer one."""
        rules = TitleRules(noise_tokens=["XViD", "XViD-EVO"])
        assert transform_title("Film.XViD-EVO.avi", rules) == "Film -EVO"

    def test_custom_blacklist(self) -> None:
        """Custom blacklist replaces the built-in one."""
        rules = TitleRules(blacklist=["Sample"])
        assert transform_title("sample.mkv", rules) == ""
        assert transform_title("English", rules) == "English"

    def test_no_tokens(self) -> None:
        """Without tokens only separators and spacing change."""
        rules = TitleRules(noise_tokens=[])
        assert transform_title("movie.YIFY.mkv", rules) == "Movie YIFY"

    def test_default_rules_match_constants(self) -> None:
        """Defaults come from the built-in token table."""
        assert TitleRules().noise_tokens == DEFAULT_NOISE_TOKENS


class TestVerboseTracing:
    """Tests for verbose rule tracing."""

    def test_logs_applied_rules(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each rule that changed the title is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="catalogr.naming.titles"):
            transform_title("The.Movie.YIFY.mkv", verbose=True)
        assert "noise_token:YIFY" in caplog.text
        assert "extension" in caplog.text
        assert "noise_token:BluRay" not in caplog.text

    def test_quiet_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """No per-rule trace without verbose."""
        with caplog.at_level(logging.DEBUG, logger="catalogr.naming.titles"):
            transform_title("The.Movie.YIFY.mkv")
        assert "noise_token:" not in caplog.text
