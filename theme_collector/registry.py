"""
Collected themes and the lookup rules used by consumers.

Serialized shape (also the shape of ``ThemeRegistry.themes``):

    {
        "light": {"--_theme---text": "#111"},                 # no brands
        "dark": {"brands": {"acme": {...}, "globex": {...}}},  # with brands
    }
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional


Snapshot = Dict[str, str]

BRANDS_KEY = "brands"


class ThemeDataError(ValueError):
    """Raised when theme data does not have the registry shape."""


def _copy_snapshot(raw: Any, where: str) -> Snapshot:
    if not isinstance(raw, dict):
        raise ThemeDataError(f"{where}: expected an object, got {type(raw).__name__}")
    snapshot: Snapshot = {}
    for name, value in raw.items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise ThemeDataError(f"{where}: variable values must be strings")
        snapshot[name] = value
    return snapshot


class ThemeRegistry(Mapping):
    """Immutable theme name -> snapshot (or brand -> snapshot) mapping."""

    def __init__(self, themes: Optional[Dict[str, Any]] = None):
        self._themes: Dict[str, Any] = {}
        for theme_name, entry in (themes or {}).items():
            if not isinstance(theme_name, str) or not theme_name:
                raise ThemeDataError("theme names must be non-empty strings")
            if isinstance(entry, dict) and BRANDS_KEY in entry:
                brands = entry[BRANDS_KEY]
                if not isinstance(brands, dict):
                    raise ThemeDataError(f"{theme_name}: brands must be an object")
                for brand in brands:
                    if not isinstance(brand, str) or not brand:
                        raise ThemeDataError(f"{theme_name}: brand names must be non-empty strings")
                self._themes[theme_name] = {
                    BRANDS_KEY: {
                        brand: _copy_snapshot(snap, f"{theme_name}/{brand}")
                        for brand, snap in brands.items()
                    }
                }
            else:
                self._themes[theme_name] = _copy_snapshot(entry, theme_name)

    def __getitem__(self, theme_name: str) -> Any:
        entry = self._themes[theme_name]
        if BRANDS_KEY in entry:
            return {BRANDS_KEY: {brand: dict(snap) for brand, snap in entry[BRANDS_KEY].items()}}
        return dict(entry)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._themes))

    def __len__(self) -> int:
        return len(self._themes)

    def __repr__(self) -> str:
        return f"ThemeRegistry({self._themes!r})"

    @property
    def themes(self) -> Dict[str, Any]:
        return self.to_dict()

    def theme_names(self) -> List[str]:
        return list(self._themes)

    def brand_names(self, theme_name: str) -> List[str]:
        entry = self._themes.get(theme_name)
        if not entry or BRANDS_KEY not in entry:
            return []
        return list(entry[BRANDS_KEY])

    def get_theme(self, theme_name: str = "", brand_name: str = "") -> Snapshot:
        """Resolve a snapshot, falling back to the first theme / first brand.

        An unknown theme or an unknown brand gives ``{}``. Brand names are
        ignored for themes collected without brands.
        """
        if not theme_name:
            first = next(iter(self._themes), "")
            if not first:
                return {}
            return self.get_theme(first, brand_name)
        entry = self._themes.get(theme_name)
        if entry is None:
            return {}
        if BRANDS_KEY not in entry:
            return dict(entry)
        brands = entry[BRANDS_KEY]
        if not brands:
            return {}
        if not brand_name:
            return dict(next(iter(brands.values())))
        return dict(brands.get(brand_name, {}))

    def to_dict(self) -> Dict[str, Any]:
        return {theme_name: self[theme_name] for theme_name in self._themes}

    def to_json(self) -> str:
        return json.dumps(self._themes, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Any) -> "ThemeRegistry":
        if not isinstance(data, dict):
            raise ThemeDataError("theme registry must be a JSON object")
        return cls(data)

    @classmethod
    def from_json(cls, raw: str) -> "ThemeRegistry":
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ThemeDataError(f"invalid theme registry JSON: {exc}") from exc
        return cls.from_dict(data)
