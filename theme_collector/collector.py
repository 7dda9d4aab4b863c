"""
Theme collection pipeline: cache check, stylesheet fetch, scan, probe,
cache write-back, ready signal.

Nothing in here raises for cache, network or discovery problems; each of
those ends in a log line and an empty (or cached) registry.
"""

import logging
from typing import List, Optional

from theme_collector.materializer import StyleOracle, ThemeMaterializer
from theme_collector.registry import ThemeRegistry
from theme_collector.scanner import TokenScanner
from theme_collector.signals import ReadySignal
from theme_collector.storage import KeyValueStore, MemoryStore, ThemeCache
from theme_collector.stylesheets import Fetch, StylesheetAggregator

logger = logging.getLogger(__name__)


class ThemeCollector:
    def __init__(
        self,
        oracle: StyleOracle,
        fetch: Fetch,
        store: Optional[KeyValueStore] = None,
        scanner: Optional[TokenScanner] = None,
        signal: Optional[ReadySignal] = None,
    ):
        self.cache = ThemeCache(store if store is not None else MemoryStore())
        self.aggregator = StylesheetAggregator(fetch)
        self.scanner = scanner or TokenScanner()
        self.materializer = ThemeMaterializer(oracle)
        self.signal = signal or ReadySignal()
        self.from_cache = False

    async def collect(self, stylesheet_urls: List[str], fingerprint: Optional[int]) -> ThemeRegistry:
        cached = await self.cache.load(fingerprint)
        if cached is not None:
            logger.info("Loaded %d theme(s) from cache (published %s)", len(cached), fingerprint)
            self.from_cache = True
            self.signal.emit(cached)
            return cached

        if not stylesheet_urls:
            logger.error("No stylesheet links found")
            return ThemeRegistry()

        logger.info("Found %d stylesheet(s), searching for themes...", len(stylesheet_urls))
        css = await self.aggregator.aggregate(stylesheet_urls)

        scan = self.scanner.scan(css)
        if not scan.is_usable:
            return ThemeRegistry()

        try:
            registry = await self.materializer.materialize(scan)
        except Exception as exc:
            logger.error("Error probing themes: %s", exc)
            return ThemeRegistry()

        logger.info("Collected themes: %s", registry.theme_names())
        await self.cache.save(registry, fingerprint)
        self.signal.emit(registry)
        return registry
