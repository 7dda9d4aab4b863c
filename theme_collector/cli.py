"""
Theme collection command line.
Opens a page in headless Chromium, collects its Webflow color themes and
writes them out as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

try:
    from playwright.async_api import async_playwright
except ImportError:
    print("ERROR: playwright not installed. Run: pip install playwright && playwright install chromium")
    raise SystemExit(1)

from theme_collector.browser import PageLocalStorage, build_page_collector, collect_page_themes
from theme_collector.registry import ThemeRegistry
from theme_collector.signals import ReadySignal
from theme_collector.storage import JsonFileStore, KeyValueStore, MemoryStore, ThemeCache


DEFAULT_TIMEOUT_MS = 60000
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def build_store(args: argparse.Namespace, page: Any) -> KeyValueStore:
    if args.no_cache:
        return MemoryStore()
    if args.cache_file:
        return JsonFileStore(Path(args.cache_file))
    return PageLocalStorage(page)


def print_summary(registry: ThemeRegistry, from_cache: bool) -> None:
    source = "cache" if from_cache else "stylesheets"
    print(f"\n🎨 {len(registry)} theme(s) from {source}")
    for theme_name in registry.theme_names():
        brands = registry.brand_names(theme_name)
        if brands:
            print(f"  - {theme_name}: brands {', '.join(brands)}")
        else:
            print(f"  - {theme_name}: {len(registry.get_theme(theme_name))} variable(s)")


async def run(args: argparse.Namespace) -> Optional[ThemeRegistry]:
    signal = ReadySignal()
    ready = []
    signal.connect(ready.append)

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=not args.headed)
        context = await browser.new_context(user_agent=DEFAULT_USER_AGENT)
        page = await context.new_page()
        try:
            print(f"🌐 Loading {args.url}...")
            await page.goto(args.url, wait_until="domcontentloaded", timeout=args.timeout)
            store = build_store(args, page)
            if args.refresh:
                await ThemeCache(store).clear()
            collector = build_page_collector(page, store=store, signal=signal)
            registry = await collect_page_themes(page, collector=collector)
        except Exception as exc:
            print(f"❌ Failed to collect themes from {args.url}: {exc}")
            return None
        finally:
            await context.close()
            await browser.close()

    if not ready:
        print("⚠️  No themes collected (see log output for details)")
        return registry

    print_summary(registry, from_cache=collector.from_cache)

    if args.output:
        output_path = Path(args.output)
        write_json(output_path, registry.to_dict())
        print(f"✅ Themes written to {output_path}")

    if args.theme or args.brand:
        print(json.dumps(registry.get_theme(args.theme or "", args.brand or ""), ensure_ascii=False, indent=2))
    return registry


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Collect Webflow color themes from a published page")
    parser.add_argument("url", help="Page URL")
    parser.add_argument("--output", "-o", help="Write the collected themes to this JSON file")
    cache = parser.add_mutually_exclusive_group()
    cache.add_argument("--cache-file", help="Cache themes in this JSON file instead of the page's localStorage")
    cache.add_argument("--no-cache", action="store_true", help="Always probe, never read or write a cache")
    parser.add_argument("--refresh", action="store_true", help="Clear the cache before collecting")
    parser.add_argument("--theme", help="Print the variables of this theme")
    parser.add_argument("--brand", help="Print the variables of this brand (with --theme, or the first theme)")
    parser.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT_MS, help="Navigation timeout in ms")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(args.verbose)
    registry = asyncio.run(run(args))
    if registry is None:
        sys.exit(1)


if __name__ == "__main__":
    main()
