"""
Turn discovered theme classes into concrete variable values.

Every theme (or theme + brand pair) is measured by putting exactly its
classes on the root element, reading each variable from the resolved
style, and putting the original classes back. The root element is shared,
so probes run one after another and each probe is a single oracle call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from theme_collector.registry import BRANDS_KEY, Snapshot, ThemeRegistry
from theme_collector.scanner import ScanResult, class_to_name

logger = logging.getLogger(__name__)


class StyleOracle(ABC):
    @abstractmethod
    async def probe(self, class_names: Sequence[str], variables: Sequence[str]) -> Dict[str, str]:
        """Resolve ``variables`` on the root element with only ``class_names`` applied.

        Must save the root class attribute, apply the classes, read the values
        and restore the attribute without yielding in between. Returns the raw
        (untrimmed) value per variable; missing variables may be left out.
        """


def build_snapshot(raw_values: Dict[str, Any], variables: Sequence[str]) -> Snapshot:
    snapshot: Snapshot = {}
    for variable in variables:
        value = raw_values.get(variable)
        if value and str(value).strip():
            snapshot[variable] = str(value).strip()
    return snapshot


class ThemeMaterializer:
    def __init__(self, oracle: StyleOracle):
        self.oracle = oracle

    async def check_class(self, variables: Sequence[str], theme_class: str, brand_class: str = "") -> Snapshot:
        class_names: List[str] = [theme_class.lstrip(".")]
        if brand_class:
            class_names.append(brand_class.lstrip("."))
        raw_values = await self.oracle.probe(class_names, list(variables))
        snapshot = build_snapshot(raw_values, variables)
        logger.debug("Probed %s: %d of %d variables resolved", " ".join(class_names),
                     len(snapshot), len(variables))
        return snapshot

    async def materialize(self, scan: ScanResult) -> ThemeRegistry:
        themes: Dict[str, Any] = {}
        for theme_class in scan.theme_classes:
            theme_name = class_to_name(theme_class)
            if scan.brand_classes:
                # Every brand is measured against every theme.
                brands: Dict[str, Snapshot] = {}
                for brand_class in scan.brand_classes:
                    brands[class_to_name(brand_class)] = await self.check_class(
                        scan.variables, theme_class, brand_class
                    )
                themes[theme_name] = {BRANDS_KEY: brands}
            else:
                themes[theme_name] = await self.check_class(scan.variables, theme_class)
        return ThemeRegistry(themes)
