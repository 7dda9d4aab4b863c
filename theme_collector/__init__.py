"""Discover Webflow color themes on a page and cache them per publish."""

from theme_collector.collector import ThemeCollector
from theme_collector.fingerprint import parse_publish_date
from theme_collector.materializer import StyleOracle, ThemeMaterializer
from theme_collector.registry import ThemeDataError, ThemeRegistry
from theme_collector.scanner import ScanResult, TokenScanner, scan_tokens
from theme_collector.signals import READY_EVENT, ReadySignal
from theme_collector.storage import JsonFileStore, KeyValueStore, MemoryStore, ThemeCache
from theme_collector.stylesheets import StylesheetAggregator, StylesheetResult

__version__ = "1.2.1"

__all__ = [
    "READY_EVENT",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "ReadySignal",
    "ScanResult",
    "StyleOracle",
    "StylesheetAggregator",
    "StylesheetResult",
    "ThemeCache",
    "ThemeCollector",
    "ThemeDataError",
    "ThemeMaterializer",
    "ThemeRegistry",
    "TokenScanner",
    "parse_publish_date",
    "scan_tokens",
]
