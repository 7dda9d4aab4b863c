"""Tests for scanner.py — theme token discovery over raw CSS."""

import logging

from tests.conftest import BRANDED_CSS, SAMPLE_CSS
from theme_collector.scanner import (
    TokenScanner,
    class_to_name,
    find_loose_theme_classes,
    find_loose_variables,
    scan_tokens,
)


class TestTokenScanner:
    def test_finds_variables_once(self):
        result = scan_tokens(SAMPLE_CSS)
        assert result.variables == ("--_theme---text", "--_theme---background")

    def test_finds_theme_classes(self):
        result = scan_tokens(SAMPLE_CSS)
        assert result.theme_classes == (".u-theme-light", ".u-theme-dark")
        assert result.theme_names == ["light", "dark"]
        assert result.brand_classes == ()
        assert result.is_usable

    def test_brand_variables_and_classes(self):
        result = scan_tokens(BRANDED_CSS)
        assert "--_brand---primary--base" in result.variables
        assert result.brand_classes == (".u-brand-acme", ".u-brand-globex")
        assert result.brand_names == ["acme", "globex"]

    def test_grouped_variable_suffix(self):
        result = scan_tokens(".u-theme-a { --_theme---button--background-hover: #000; }")
        assert result.variables == ("--_theme---button--background-hover",)

    def test_ignores_other_variables(self):
        result = scan_tokens(":root { --brand-color: red; --_primitives---red: red; }")
        assert result.variables == ()

    def test_no_theme_classes_is_unusable(self, caplog):
        css = ":root { --_theme---text: #111; } .my-theme-dark { color: red; }"
        with caplog.at_level(logging.WARNING):
            result = TokenScanner().scan(css)
        assert result.theme_classes == ()
        assert not result.is_usable
        assert "No theme classes found" in caplog.text
        assert ".my-theme-dark" in caplog.text

    def test_no_variables_is_unusable(self, caplog):
        css = ".u-theme-dark { --color-text: #eee; }"
        with caplog.at_level(logging.WARNING):
            result = TokenScanner().scan(css)
        assert result.variables == ()
        assert not result.is_usable
        assert "--color-text" in caplog.text
        assert len(result.notes) == 1

    def test_empty_corpus(self):
        result = scan_tokens("")
        assert not result.is_usable
        assert len(result.notes) == 2


class TestHelpers:
    def test_class_to_name(self):
        assert class_to_name(".u-theme-dark") == "dark"
        assert class_to_name(".u-brand-acme-co") == "acme-co"
        assert class_to_name("u-theme-light") == "light"

    def test_loose_matches_are_capped(self):
        css = " ".join(f".theme-{i} {{}}" for i in range(20))
        assert len(find_loose_theme_classes(css)) == 10
        css = " ".join(f"--v{i}: 0;" for i in range(20))
        assert find_loose_variables(css, limit=3) == ["--v0", "--v1", "--v2"]
