"""Tests for registry.py — lookup fallback chain and serialization."""

import pytest

from theme_collector.registry import ThemeDataError, ThemeRegistry


@pytest.fixture
def registry():
    return ThemeRegistry({
        "A": {"brands": {"X": {"--_brand---c": "x"}, "Y": {"--_brand---c": "y"}}},
        "B": {"k": "v"},
    })


class TestGetTheme:
    def test_no_arguments_uses_first_theme_and_brand(self, registry):
        assert registry.get_theme() == {"--_brand---c": "x"}

    def test_theme_without_brand_uses_first_brand(self, registry):
        assert registry.get_theme("A") == {"--_brand---c": "x"}

    def test_named_brand(self, registry):
        assert registry.get_theme("A", "Y") == {"--_brand---c": "y"}

    def test_unknown_brand(self, registry):
        assert registry.get_theme("A", "Z") == {}

    def test_flat_theme_ignores_brand(self, registry):
        assert registry.get_theme("B") == {"k": "v"}
        assert registry.get_theme("B", "X") == {"k": "v"}

    def test_unknown_theme(self, registry):
        assert registry.get_theme("missing") == {}

    def test_empty_theme_keeps_brand(self, registry):
        assert registry.get_theme("", "Y") == {"--_brand---c": "y"}

    def test_empty_registry(self):
        assert ThemeRegistry().get_theme() == {}

    def test_theme_with_empty_brands(self):
        assert ThemeRegistry({"A": {"brands": {}}}).get_theme("A", "X") == {}

    def test_result_cannot_mutate_registry(self, registry):
        registry.get_theme("B")["k"] = "changed"
        assert registry.get_theme("B") == {"k": "v"}


class TestRegistryShape:
    def test_insertion_order(self, registry):
        assert registry.theme_names() == ["A", "B"]
        assert list(registry) == ["A", "B"]

    def test_brand_names(self, registry):
        assert registry.brand_names("A") == ["X", "Y"]
        assert registry.brand_names("B") == []
        assert registry.brand_names("missing") == []

    def test_themes_is_a_copy(self, registry):
        registry.themes["B"]["k"] = "changed"
        assert registry["B"] == {"k": "v"}

    def test_json_round_trip(self, registry):
        assert ThemeRegistry.from_json(registry.to_json()) == registry

    def test_from_json_rejects_garbage(self):
        with pytest.raises(ValueError):
            ThemeRegistry.from_json("{not json")

    def test_from_json_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            ThemeRegistry.from_json('["light", "dark"]')
        with pytest.raises(ValueError):
            ThemeRegistry.from_json('{"light": {"--_theme---text": 3}}')
        with pytest.raises(ValueError):
            ThemeRegistry.from_json('{"light": {"brands": []}}')


class TestRegistryValidation:
    def test_rejects_empty_theme_name(self):
        with pytest.raises(ThemeDataError):
            ThemeRegistry({"": {"--_theme---text": "#111"}})

    def test_rejects_empty_brand_name(self):
        with pytest.raises(ThemeDataError):
            ThemeRegistry({"dark": {"brands": {"": {}}}})

    def test_default_lookup_on_valid_registry_terminates(self):
        registry = ThemeRegistry.from_json('{"dark": {"--_theme---text": "#eee"}}')
        assert registry.get_theme() == {"--_theme---text": "#eee"}
