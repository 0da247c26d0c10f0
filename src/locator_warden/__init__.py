"""Locator Warden - centralized Playwright locators and suite linting."""

__version__ = "0.1.0"
