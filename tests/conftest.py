"""Shared fakes: an in-memory root element that resolves variables, and
canned stylesheet responses. No browser is started by the test suite."""

from typing import Dict, List, Optional, Sequence

import pytest

from theme_collector.materializer import StyleOracle


SAMPLE_CSS = """
:root { --_theme---text: #111; --_theme---background: #fff; }
.u-theme-light { --_theme---text: #111; --_theme---background: #fff; }
.u-theme-dark { --_theme---text: #eee; --_theme---background: #000; }
.u-theme-dark .card { color: var(--_theme---text); }
"""

BRANDED_CSS = SAMPLE_CSS + """
.u-brand-acme { --_brand---primary--base: red; }
.u-brand-globex { --_brand---primary--base: blue; }
"""


class FakeStyleRoot(StyleOracle):
    """Root element double: class attribute plus per-class variable rules.

    Later classes in the attribute win, like a stylesheet where the brand
    rules come after the theme rules.
    """

    def __init__(self, rules: Dict[str, Dict[str, str]], base: Optional[Dict[str, str]] = None,
                 class_attr: Optional[str] = None):
        self.rules = rules
        self.base = dict(base or {})
        self.class_attr = class_attr
        self.probed: List[Optional[str]] = []

    def resolve(self, variable: str) -> str:
        value = self.base.get(variable, "")
        for class_name in (self.class_attr or "").split():
            value = self.rules.get(class_name, {}).get(variable, value)
        return value

    async def probe(self, class_names: Sequence[str], variables: Sequence[str]) -> Dict[str, str]:
        saved = self.class_attr
        self.class_attr = " ".join(class_names)
        self.probed.append(self.class_attr)
        values = {variable: self.resolve(variable) for variable in variables}
        self.class_attr = saved
        return values


class FakeResponse:
    def __init__(self, body: str = "", status: int = 200):
        self.body = body
        self.status = status

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    async def text(self) -> str:
        return self.body


def make_fetch(responses: Dict[str, object]):
    """Fetch double. Values are FakeResponses or exceptions to raise."""
    calls: List[str] = []

    async def fetch(url: str):
        calls.append(url)
        outcome = responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    fetch.calls = calls
    return fetch


@pytest.fixture
def theme_rules() -> Dict[str, Dict[str, str]]:
    return {
        "u-theme-light": {"--_theme---text": " #111 ", "--_theme---background": "#fff"},
        "u-theme-dark": {"--_theme---text": "#eee", "--_theme---background": "#000"},
        "u-brand-acme": {"--_brand---primary--base": "red"},
        "u-brand-globex": {"--_brand---primary--base": "blue"},
    }


@pytest.fixture
def style_root(theme_rules) -> FakeStyleRoot:
    return FakeStyleRoot(theme_rules, class_attr="w-mod-js w-mod-ix")
