"""
Publish fingerprint for a page.

Webflow writes a comment in front of the <html> element on every publish:

    <!-- Last Published: Fri Jan 02 2026 10:15:41 GMT+0000 (Coordinated Universal Time) -->

The timestamp in that comment changes on every republish and nowhere else,
so it is used as the cache key for collected themes.
"""

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


PUBLISH_PATTERN = re.compile(r"Last Published: (.+?) GMT")

DATE_FORMATS = [
    "%a %b %d %Y %H:%M:%S",
    "%b %d %Y %H:%M:%S",
    "%a %b %d %Y",
]


def _parse_date(value: str) -> Optional[datetime]:
    value = value.strip()
    if not value:
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        pass
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_publish_date(comment_text: Optional[str]) -> Optional[int]:
    """Return the publish time in the comment as epoch milliseconds, or None."""
    if not comment_text:
        return None
    match = PUBLISH_PATTERN.search(comment_text)
    if not match:
        return None
    parsed = _parse_date(match.group(1))
    if parsed is None:
        return None
    # The marker is always GMT; naive values are read as UTC.
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp() * 1000)
