"""Minimal stand-ins for Playwright Page/Locator used by the offline tests."""

from contextlib import asynccontextmanager


class FakeLocator:
    """Records the chain of locator calls as a jQuery-like key string."""

    def __init__(self, page, key):
        self._page = page
        self.key = key

    def locator(self, css):
        return FakeLocator(self._page, f"{self.key} {css}".strip())

    @property
    def first(self):
        return FakeLocator(self._page, f"{self.key}:first")

    @property
    def last(self):
        return FakeLocator(self._page, f"{self.key}:last")

    def nth(self, index):
        return FakeLocator(self._page, f"{self.key}:eq({index})")

    def _matches(self):
        # ".x:first" matches whenever ".x" does
        key = self.key
        if key not in self._page.counts and key.endswith(":first"):
            return min(self._page.counts.get(key[:-len(":first")], 0), 1)
        return self._page.counts.get(key, 0)

    async def count(self):
        return self._matches()

    async def is_visible(self):
        return self._matches() > 0

    async def get_attribute(self, name):
        return self._page.attributes.get((self.key, name))

    async def inner_text(self, timeout=None):
        return self._page.texts.get(self.key, "")

    async def evaluate(self, expression, arg=None):
        return self._page.evaluated.get(self.key)

    async def wait_for(self, state="visible", timeout=None):
        if self._matches() == 0:
            raise TimeoutError(f"Timeout {timeout}ms waiting for {self.key}")

    async def click(self, timeout=None):
        self._page.clicked.append(self.key)
        target = self._page.links.get(self.key)
        if target:
            self._page.url = target


class FakePage:
    def __init__(self, counts=None, url="about:blank"):
        self.counts = counts or {}
        self.attributes = {}
        self.texts = {}
        self.evaluated = {}
        self.links = {}
        self.url = url
        self.visited = []
        self.clicked = []
        self.screenshots = 0

    def locator(self, css):
        return FakeLocator(self, css)

    async def goto(self, url, wait_until=None, timeout=None):
        self.visited.append(url)
        self.url = url

    @asynccontextmanager
    async def expect_navigation(self, wait_until=None, timeout=None):
        before = self.url
        yield
        if self.url == before:
            raise TimeoutError(f"Timeout {timeout}ms waiting for navigation from {before}")

    async def wait_for_timeout(self, milliseconds):
        return None

    async def screenshot(self, full_page=False):
        self.screenshots += 1
        return b"\x89PNG"
