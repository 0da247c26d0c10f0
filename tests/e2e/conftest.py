"""Real Chromium fixtures. Tests here are skipped when no browser is installed."""

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from locator_warden.config import Config, RetryConfig, TimeoutsConfig


@pytest.fixture(scope="session")
def browser():
    playwright = sync_playwright().start()
    try:
        browser = playwright.chromium.launch()
    except PlaywrightError as e:
        playwright.stop()
        pytest.skip(f"Chromium is not available: {e}")

    yield browser

    browser.close()
    playwright.stop()


@pytest.fixture
def page(browser):
    context = browser.new_context()
    page = context.new_page()
    yield page
    context.close()


@pytest.fixture
def config():
    """Short timeouts so missing elements fail fast."""
    return Config(
        timeouts=TimeoutsConfig(short=1000, default="short"),
        retry=RetryConfig(max_attempts=3, backoff_seconds=0.5),
    )
