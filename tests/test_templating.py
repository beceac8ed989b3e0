"""Tests for facefile.core.templating."""

import itertools

import pytest

from facefile.core.templating import has_placeholders, resolve, validate_resolved_path
from facefile.errors import ErrorCode, InvalidTemplate


class TestResolve:
    def test_display_kind_short_token(self):
        assert resolve("%s", "x", []) == "x"

    def test_window_system_token_with_empty_display(self):
        assert resolve("%{window-system}", "", []) == ""

    def test_theme_joined_with_hyphen(self):
        assert resolve("%{theme}", "tty", ["dark", "solarized"]) == "dark-solarized"

    def test_leading_hyphen_theme_empty_without_themes(self):
        assert resolve("%{-theme}", "tty", []) == ""

    def test_leading_hyphen_theme(self):
        assert resolve("%{-theme}", "tty", ["dark"]) == "-dark"

    def test_trailing_hyphen_theme(self):
        assert resolve("%{theme-}", "tty", ["dark"]) == "dark-"

    def test_all_theme_tokens_empty_without_themes(self):
        assert resolve("a%{theme}b%{-theme}c%{theme-}d", "x", []) == "abcd"

    def test_mixed_template(self):
        assert resolve("a-%s-%{theme}-b", "x", ["t1", "t2"]) == "a-x-t1-t2-b"

    def test_every_occurrence_replaced(self):
        assert resolve("%s/%s/%{window-system}", "w32", []) == "w32/w32/w32"

    def test_typical_faces_file(self):
        result = resolve("~/.config/faces%{-theme}-%s.ini", "x", ["modus", "hc"])
        assert result == "~/.config/faces-modus-hc-x.ini"

    @pytest.mark.parametrize("template", [
        "",
        "plain/path.ini",
        "%d and %{unknown} and %{THEME}",
        "%{theme",
        "%{ theme }",
        "100%",
    ])
    def test_unrecognized_text_passes_through(self, template):
        assert resolve(template, "x", ["dark"]) == template

    def test_theme_order_follows_activation_order(self):
        assert resolve("%{theme}", "x", ["b", "a"]) == "b-a"

    def test_accepts_tuple_of_themes(self):
        assert resolve("%{theme}", "x", ("one", "two")) == "one-two"

    def test_replacement_text_is_not_rescanned(self):
        assert resolve("%s", "%{theme}", ["dark"]) == "%{theme}"

    def test_idempotent_once_resolved(self):
        once = resolve("faces-%s%{-theme}.ini", "pgtk", ["dark", "warm"])
        assert resolve(once, "x", ["other"]) == once

    def test_order_independent_substitution(self):
        display, themes = "x", ["t1", "t2"]
        joined = "-".join(themes)
        table = [
            ("%s", display),
            ("%{window-system}", display),
            ("%{theme}", joined),
            ("%{-theme}", "-" + joined),
            ("%{theme-}", joined + "-"),
        ]
        template = "%{theme-}%s/%{window-system}-%{theme}%{-theme}.ini"
        expected = resolve(template, display, themes)
        for ordering in itertools.permutations(table):
            result = template
            for token, value in ordering:
                result = result.replace(token, value)
            assert result == expected


class TestHasPlaceholders:
    def test_detects_tokens(self):
        assert has_placeholders("faces-%{theme}.ini")
        assert has_placeholders("%s")

    def test_plain_path(self):
        assert not has_placeholders("faces.ini")


class TestValidateResolvedPath:
    def test_returns_path_unchanged(self):
        assert validate_resolved_path("/tmp/faces-x.ini") == "/tmp/faces-x.ini"

    def test_rejects_empty(self):
        with pytest.raises(InvalidTemplate) as excinfo:
            validate_resolved_path("   ")
        assert excinfo.value.code is ErrorCode.TEMPLATE_INVALID

    def test_rejects_nul_byte(self):
        with pytest.raises(InvalidTemplate) as excinfo:
            validate_resolved_path("faces\x00.ini")
        assert "\\0" in excinfo.value.details["resolved"]
