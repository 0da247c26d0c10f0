"""Page object for the login screen."""

import re

from playwright.sync_api import Page, expect

from ..config import Config
from ..locators.registry import Registry
from ..testdata import ERROR_MESSAGES, LOGIN_TEST_DATA
from .base_page import BasePage


class LoginPage(BasePage):
    """Login screen: credentials form, remember-me and error feedback."""

    GROUP = "LOGIN"
    PATH = "/login"

    def __init__(self, page: Page, registry: Registry | None = None, config: Config | None = None):
        super().__init__(page, registry, config)
        self.email_input = self.locator("EMAIL_INPUT")
        self.password_input = self.locator("PASSWORD_INPUT")
        self.login_button = self.locator("LOGIN_BUTTON")
        self.error_message = self.locator("ERROR_MESSAGE")
        self.success_message = self.locator("SUCCESS_MESSAGE")
        self.forgot_password_link = self.locator("FORGOT_PASSWORD_LINK")
        self.remember_me_checkbox = self.locator("REMEMBER_ME_CHECKBOX")
        self.login_form = self.locator("LOGIN_FORM")
        self.validation_error = self.locator("VALIDATION_ERROR")
        self.first_attempt_label = self.locator("FIRST_ATTEMPT_LABEL")
        self.toast_message = self.locator("TOAST_MESSAGE")
        self.blocked_user = self.locator("BLOCKED_USER")

    # Actions

    def fill_email(self, email: str) -> None:
        self.email_input.fill(email, timeout=self.timeout)

    def fill_password(self, password: str) -> None:
        self.password_input.fill(password, timeout=self.timeout)

    def click_login(self) -> None:
        self.login_button.click(timeout=self.timeout)

    def login(self, email: str, password: str) -> None:
        """Fill the credentials and submit."""
        self.fill_email(email)
        self.fill_password(password)
        self.click_login()

    def login_with_valid_credentials(self) -> None:
        self.login(LOGIN_TEST_DATA["VALID_EMAIL"], LOGIN_TEST_DATA["VALID_PASSWORD"])

    def login_with_invalid_credentials(self) -> None:
        self.login(LOGIN_TEST_DATA["INVALID_EMAIL"], LOGIN_TEST_DATA["INVALID_PASSWORD"])

    def clear_email(self) -> None:
        self.email_input.clear(timeout=self.timeout)

    def clear_password(self) -> None:
        self.password_input.clear(timeout=self.timeout)

    def clear_form(self) -> None:
        self.clear_email()
        self.clear_password()

    def toggle_remember_me(self) -> None:
        self.remember_me_checkbox.click(timeout=self.timeout)

    def click_forgot_password(self) -> None:
        self.forgot_password_link.click(timeout=self.timeout)

    def get_email_value(self) -> str:
        return self.email_input.input_value(timeout=self.timeout)

    def get_password_value(self) -> str:
        return self.password_input.input_value(timeout=self.timeout)

    # Assertions

    def expect_login_form_visible(self) -> None:
        expect(self.email_input).to_be_visible(timeout=self.timeout)
        expect(self.password_input).to_be_visible(timeout=self.timeout)
        expect(self.login_button).to_be_visible(timeout=self.timeout)

    def expect_on_login_page(self) -> None:
        self.expect_url(re.escape(self.url))

    def expect_error_message(self) -> None:
        expect(self.error_message).to_be_visible(timeout=self.timeout)

    def expect_specific_error_message(self, message: str) -> None:
        expect(self.page.get_by_text(message)).to_be_visible(timeout=self.timeout)

    def expect_blocked_user_message(self) -> None:
        expect(self.blocked_user).to_be_visible(timeout=self.timeout)
        expect(self.blocked_user).to_have_text(
            ERROR_MESSAGES["LOGIN"]["BLOCKED_USER"], timeout=self.timeout
        )

    def expect_toast_message(self) -> None:
        expect(self.toast_message).to_be_visible(timeout=self.timeout)

    def expect_first_attempt_message(self) -> None:
        expect(self.first_attempt_label).to_be_visible(timeout=self.timeout)

    def expect_email_empty(self) -> None:
        expect(self.email_input).to_have_value("", timeout=self.timeout)

    def expect_password_empty(self) -> None:
        expect(self.password_input).to_have_value("", timeout=self.timeout)

    def expect_remember_me_checked(self) -> None:
        expect(self.remember_me_checkbox).to_be_checked(timeout=self.timeout)

    def expect_remember_me_unchecked(self) -> None:
        expect(self.remember_me_checkbox).not_to_be_checked(timeout=self.timeout)

    def expect_forgot_password_link_visible(self) -> None:
        expect(self.forgot_password_link).to_be_visible(timeout=self.timeout)

    def expect_login_button_enabled(self) -> None:
        expect(self.login_button).to_be_enabled(timeout=self.timeout)

    def expect_login_button_disabled(self) -> None:
        expect(self.login_button).to_be_disabled(timeout=self.timeout)
