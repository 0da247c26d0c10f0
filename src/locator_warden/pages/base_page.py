"""Base class for page objects."""

import re
from pathlib import Path

from playwright.sync_api import Locator, Page, expect

from ..capture.screenshots import take_screenshot, wait_for_page_load
from ..config import Config, load_config
from ..locators.registry import Registry, default_registry
from ..locators.resolver import click_with_retry, resolve


class BasePage:
    """
    Binds a Playwright page to the locator registry.

    Subclasses set ``GROUP`` to the registry group describing their screen
    and expose intention-revealing operations. Playwright errors raised by
    those operations propagate unchanged.
    """

    GROUP = ""
    PATH = "/"

    def __init__(self, page: Page, registry: Registry | None = None, config: Config | None = None):
        self.page = page
        self.registry = registry if registry is not None else default_registry()
        self.config = config or load_config()
        self.timeout = self.config.timeouts.default_ms

    def locator(self, key: str, group: str | None = None) -> Locator:
        """Resolve a registry entry of this page's group (or another group)."""
        return resolve(self.page, self.registry.get(group or self.GROUP, key))

    @property
    def url(self) -> str:
        return f"{self.config.base_url}{self.PATH}"

    def goto(self) -> None:
        """Navigate to this page."""
        self.page.goto(self.url)

    def wait_for_page_load(self) -> None:
        wait_for_page_load(self.page)

    def current_url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def expect_url(self, pattern: str) -> None:
        """Assert the current URL matches a regular expression."""
        expect(self.page).to_have_url(re.compile(pattern), timeout=self.timeout)

    def click_with_retry(self, key: str, group: str | None = None) -> None:
        """Click a registry entry, retrying transient visibility failures."""
        click_with_retry(
            self.page,
            self.registry.get(group or self.GROUP, key),
            max_attempts=self.config.retry.max_attempts,
            timeout=self.timeout,
            backoff=self.config.retry.backoff_seconds,
        )

    def take_screenshot(self, name: str) -> Path:
        return take_screenshot(self.page, name, self.config.paths.results_dir)
