#!/usr/bin/env python3
"""
Webflow theme collection script.
Collects the color themes of a published page using Playwright.

    python scripts/collect.py https://example.webflow.io --output ./themes.json
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from theme_collector.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
