"""
Playwright adapters: style oracle, localStorage store, page metadata and
publishing the result back into the page as ``window.colorThemes``.
"""

import logging
from typing import Dict, List, Optional, Sequence

from playwright.async_api import Page

from theme_collector.collector import ThemeCollector
from theme_collector.fingerprint import parse_publish_date
from theme_collector.materializer import StyleOracle
from theme_collector.registry import ThemeRegistry
from theme_collector.signals import READY_EVENT, ReadySignal
from theme_collector.storage import KeyValueStore

logger = logging.getLogger(__name__)


PROBE_SCRIPT = """({classNames, variables}) => {
    const root = document.documentElement;
    const saved = root.getAttribute('class');
    const values = {};
    try {
        root.setAttribute('class', '');
        root.classList.add(...classNames);
        const style = getComputedStyle(root);
        variables.forEach(v => { values[v] = style.getPropertyValue(v); });
    } finally {
        if (saved === null) {
            root.removeAttribute('class');
        } else {
            root.setAttribute('class', saved);
        }
    }
    return values;
}"""

PUBLISH_COMMENT_SCRIPT = """() => {
    const node = document.documentElement.previousSibling;
    return node && node.nodeType === Node.COMMENT_NODE ? node.textContent : null;
}"""

STYLESHEET_URLS_SCRIPT = """() =>
    Array.from(document.querySelectorAll('link[rel="stylesheet"]')).map(el => el.href).filter(Boolean)
"""

PUBLISH_THEMES_SCRIPT = """({themes, eventName}) => {
    window.colorThemes = {
        themes: themes,
        getTheme(themeName = '', brandName = '') {
            if (!themeName) {
                const first = Object.keys(this.themes)[0];
                return first ? this.getTheme(first, brandName) : {};
            }
            const theme = this.themes[themeName];
            if (!theme) return {};
            if (!theme.brands) return theme;
            const brandNames = Object.keys(theme.brands);
            if (brandNames.length === 0) return {};
            if (!brandName) return theme.brands[brandNames[0]];
            return theme.brands[brandName] || {};
        },
    };
    document.dispatchEvent(new CustomEvent(eventName));
}"""


class PlaywrightStyleOracle(StyleOracle):
    def __init__(self, page: Page):
        self.page = page

    async def probe(self, class_names: Sequence[str], variables: Sequence[str]) -> Dict[str, str]:
        # One evaluate call runs as a single task in the page, so no page
        # script can observe the swapped class attribute.
        return await self.page.evaluate(
            PROBE_SCRIPT, {"classNames": list(class_names), "variables": list(variables)}
        )


class PageLocalStorage(KeyValueStore):
    def __init__(self, page: Page):
        self.page = page

    async def get_item(self, key: str) -> Optional[str]:
        return await self.page.evaluate("(key) => window.localStorage.getItem(key)", key)

    async def set_item(self, key: str, value: str) -> None:
        await self.page.evaluate(
            "([key, value]) => window.localStorage.setItem(key, value)", [key, value]
        )

    async def remove_item(self, key: str) -> None:
        await self.page.evaluate("(key) => window.localStorage.removeItem(key)", key)


async def read_publish_marker(page: Page) -> Optional[str]:
    return await page.evaluate(PUBLISH_COMMENT_SCRIPT)


async def read_fingerprint(page: Page) -> Optional[int]:
    return parse_publish_date(await read_publish_marker(page))


async def extract_stylesheet_urls(page: Page) -> List[str]:
    return await page.evaluate(STYLESHEET_URLS_SCRIPT)


async def publish_registry(page: Page, registry: ThemeRegistry, event_name: str = READY_EVENT) -> None:
    await page.evaluate(PUBLISH_THEMES_SCRIPT, {"themes": registry.to_dict(), "eventName": event_name})


def build_page_collector(
    page: Page,
    store: Optional[KeyValueStore] = None,
    signal: Optional[ReadySignal] = None,
) -> ThemeCollector:
    """Wire a collector to a page. ``store`` defaults to the page's localStorage."""
    return ThemeCollector(
        oracle=PlaywrightStyleOracle(page),
        fetch=page.request.get,
        store=store if store is not None else PageLocalStorage(page),
        signal=signal,
    )


async def collect_page_themes(
    page: Page,
    collector: Optional[ThemeCollector] = None,
    publish: bool = True,
) -> ThemeRegistry:
    """Collect themes for a loaded page.

    With ``publish`` the registry is installed as ``window.colorThemes`` and
    ``colorThemesReady`` is dispatched in the page once the signal has fired.
    """
    collector = collector or build_page_collector(page)
    try:
        fingerprint = await read_fingerprint(page)
        urls = await extract_stylesheet_urls(page)
    except Exception as exc:
        logger.error("Error reading page %s: %s", page.url, exc)
        return ThemeRegistry()
    if fingerprint is None:
        logger.info("No publish date on %s; cache disabled for this load", page.url)
    registry = await collector.collect(urls, fingerprint)
    if publish and collector.signal.fired:
        try:
            await publish_registry(page, registry, collector.signal.name)
        except Exception as exc:
            logger.warning("Failed to publish themes to page: %s", exc)
    return registry
