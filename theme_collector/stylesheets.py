"""
Fetch every linked stylesheet and concatenate the bodies.

A stylesheet that cannot be fetched contributes an empty string; one bad
URL never stops the others.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

logger = logging.getLogger(__name__)


# Anything with ``ok``, ``status`` and ``async text()``, e.g. playwright's APIResponse.
Fetch = Callable[[str], Awaitable[Any]]

CORPUS_SEPARATOR = "\n"


@dataclass
class StylesheetResult:
    url: str
    ok: bool
    text: str
    status: Optional[int] = None
    error: Optional[str] = None


class StylesheetAggregator:
    def __init__(self, fetch: Fetch):
        self.fetch = fetch

    async def fetch_one(self, url: str) -> StylesheetResult:
        try:
            response = await self.fetch(url)
            status = getattr(response, "status", None)
            if not response.ok:
                logger.warning("Failed to fetch stylesheet: %s (status %s)", url, status)
                return StylesheetResult(url=url, ok=False, text="", status=status,
                                        error=f"HTTP {status}")
            text = await response.text()
            return StylesheetResult(url=url, ok=True, text=text or "", status=status)
        except Exception as exc:
            logger.warning("Error fetching %s: %s", url, exc)
            return StylesheetResult(url=url, ok=False, text="", error=str(exc))

    async def fetch_all(self, urls: List[str]) -> List[StylesheetResult]:
        return list(await asyncio.gather(*(self.fetch_one(url) for url in urls)))

    async def aggregate(self, urls: List[str]) -> str:
        results = await self.fetch_all(urls)
        fetched = sum(1 for r in results if r.ok)
        logger.info("Fetched %d of %d stylesheet(s)", fetched, len(results))
        return CORPUS_SEPARATOR.join(r.text for r in results)
