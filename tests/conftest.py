"""Shared fixtures: a mock Playwright page and test configuration."""

from unittest.mock import MagicMock

import pytest

from locator_warden.config import Config, RetryConfig
from locator_warden.locators import Registry, TestId, Text


class MockPage:
    """Mock Playwright Page that hands out one mock locator per selector."""

    def __init__(self, url: str = "about:blank", title: str = "UI Automation Practice App"):
        self.url = url
        self._title = title
        self.locators: dict[str, MagicMock] = {}
        self.goto = MagicMock()
        self.wait_for_load_state = MagicMock()
        self.screenshot = MagicMock()
        self.content_html = "<html><body></body></html>"

    def locator(self, selector):
        if selector not in self.locators:
            self.locators[selector] = MagicMock(name=selector)
        return self.locators[selector]

    def get_by_text(self, text):
        return self.locator(f"text={text}")

    def title(self):
        return self._title

    def content(self):
        return self.content_html


@pytest.fixture
def page():
    """Provide mock page."""
    return MockPage()


@pytest.fixture
def config():
    """Configuration with no retry backoff so tests stay fast."""
    return Config(retry=RetryConfig(max_attempts=3, backoff_seconds=0))


@pytest.fixture
def small_registry():
    """Two groups sharing the email field by alias."""
    email = TestId("email-input")
    return Registry.from_mapping({
        "LOGIN": {
            "EMAIL_INPUT": email,
            "LOGIN_BUTTON": TestId("login-button"),
            "WELCOME": Text("Welcome"),
        },
        "REGISTRATION": {
            "EMAIL_INPUT": email,
            "REGISTER_BUTTON": TestId("register-button"),
        },
    })
