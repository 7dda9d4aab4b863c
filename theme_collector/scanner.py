"""
Pattern scan of raw stylesheet text for theme tokens.

Not a CSS parser. Webflow emits variables from the "Theme" and "Brand"
collections as ``--_theme---<name>`` / ``--_brand---<group>--<name>`` and
mode classes as ``.u-theme-<name>`` / ``.u-brand-<name>``; those literal
shapes are all that is matched.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Tuple

logger = logging.getLogger(__name__)


VARIABLE_PATTERNS = [
    re.compile(r"--_theme---[\w-]+(?:--[\w-]+)?"),
    re.compile(r"--_brand---[\w-]+(?:--[\w-]+)?"),
]
CLASS_PATTERN = re.compile(r"\.u-(?:theme|brand)-[\w-]+")
THEME_CLASS_PREFIX = ".u-theme-"
BRAND_CLASS_PREFIX = ".u-brand-"

LOOSE_THEME_CLASS_PATTERN = re.compile(r"\.[a-z0-9_-]*theme[a-z0-9_-]*", re.IGNORECASE)
LOOSE_VARIABLE_PATTERN = re.compile(r"--[a-z0-9_-]+", re.IGNORECASE)
DIAGNOSTIC_LIMIT = 10


def _unique(values: List[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(v.strip() for v in values))


def class_to_name(class_token: str) -> str:
    """``.u-theme-dark`` -> ``dark``; ``.u-brand-acme`` -> ``acme``."""
    name = class_token.lstrip(".")
    for prefix in (THEME_CLASS_PREFIX, BRAND_CLASS_PREFIX):
        bare = prefix.lstrip(".")
        if name.startswith(bare):
            return name[len(bare):]
    return name


@dataclass(frozen=True)
class ScanResult:
    variables: Tuple[str, ...] = ()
    theme_classes: Tuple[str, ...] = ()
    brand_classes: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = field(default=(), compare=False)

    @property
    def theme_names(self) -> List[str]:
        return [class_to_name(c) for c in self.theme_classes]

    @property
    def brand_names(self) -> List[str]:
        return [class_to_name(c) for c in self.brand_classes]

    @property
    def is_usable(self) -> bool:
        return bool(self.theme_classes) and bool(self.variables)


def find_loose_theme_classes(css: str, limit: int = DIAGNOSTIC_LIMIT) -> List[str]:
    return LOOSE_THEME_CLASS_PATTERN.findall(css)[:limit]


def find_loose_variables(css: str, limit: int = DIAGNOSTIC_LIMIT) -> List[str]:
    return LOOSE_VARIABLE_PATTERN.findall(css)[:limit]


class TokenScanner:
    def scan(self, css: str) -> ScanResult:
        found_variables: List[str] = []
        for pattern in VARIABLE_PATTERNS:
            found_variables.extend(pattern.findall(css))
        variables = _unique(found_variables)

        classes = _unique(CLASS_PATTERN.findall(css))
        theme_classes = tuple(c for c in classes if c.startswith(THEME_CLASS_PREFIX))
        brand_classes = tuple(c for c in classes if c.startswith(BRAND_CLASS_PREFIX))

        logger.info("Found theme variables: %s", list(variables))
        logger.info("Found theme classes: %s", list(theme_classes))
        logger.info("Found brand classes: %s", list(brand_classes))

        notes: List[str] = []
        if not theme_classes:
            nearby = find_loose_theme_classes(css)
            notes.append(f"No theme classes found matching pattern .u-theme-*; classes with 'theme': {nearby}")
            logger.warning("No theme classes found matching pattern .u-theme-*")
            logger.warning("Found classes with 'theme': %s", nearby)
        if not variables:
            nearby = find_loose_variables(css)
            notes.append(f"No theme variables found; some CSS variables: {nearby}")
            logger.warning(
                "No theme variables found. Make sure your Webflow variables are in a "
                "collection named 'Theme' or 'Brand'"
            )
            logger.warning("Found some CSS variables: %s", nearby)

        return ScanResult(
            variables=variables,
            theme_classes=theme_classes,
            brand_classes=brand_classes,
            notes=tuple(notes),
        )


def scan_tokens(css: str) -> ScanResult:
    return TokenScanner().scan(css)
