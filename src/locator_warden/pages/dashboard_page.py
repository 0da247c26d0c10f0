"""Page object for the dashboard shown after login."""

import re

from playwright.sync_api import Page, expect

from ..config import Config
from ..locators.registry import Registry
from ..testdata import PAGE_TITLES
from .base_page import BasePage


class DashboardPage(BasePage):
    GROUP = "DASHBOARD"
    PATH = "/dashboard"

    def __init__(self, page: Page, registry: Registry | None = None, config: Config | None = None):
        super().__init__(page, registry, config)
        self.app_heading = self.locator("APP_HEADING")
        self.user_menu = self.locator("USER_MENU")
        self.logout_button = self.locator("LOGOUT_BUTTON")
        self.sidebar_nav = self.locator("SIDEBAR_NAV")
        self.main_content = self.locator("MAIN_CONTENT")
        self.welcome_message = self.locator("WELCOME_MESSAGE")
        self.user_profile = self.locator("USER_PROFILE")
        self.dashboard_stats = self.locator("DASHBOARD_STATS")
        self.dashboard_title = self.locator("DASHBOARD_TITLE")

    def get_title(self) -> str:
        return self.title()

    def expect_on_dashboard_page(self) -> None:
        """Wait for the page to settle, then check we landed on the dashboard."""
        self.wait_for_page_load()
        self.expect_url(re.escape(self.url))

    def expect_dashboard_title_visible(self) -> None:
        expect(self.dashboard_title).to_be_visible(timeout=self.timeout)

    def expect_app_heading_visible(self) -> None:
        expect(self.app_heading).to_be_visible(timeout=self.timeout)

    def expect_title(self, title: str = PAGE_TITLES["DASHBOARD"]) -> None:
        expect(self.page).to_have_title(title, timeout=self.timeout)

    def logout(self) -> None:
        """Open the user menu and log out."""
        self.user_menu.click(timeout=self.timeout)
        self.click_with_retry("LOGOUT_BUTTON")
