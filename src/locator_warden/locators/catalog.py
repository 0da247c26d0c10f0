"""
Centralized locator catalog.

Single source of truth for every element the suite touches. Entries that
reuse another group's descriptor reference the same object instead of
repeating its value, so the duplicate checker treats them as aliases.

Keep each group a plain dict literal: `locator-warden locators` reads this
file as text.
"""

from .descriptors import TestId, Text

LOGIN_LOCATORS = {
    "EMAIL_INPUT": TestId("email-input"),
    "PASSWORD_INPUT": TestId("password-input"),
    "LOGIN_BUTTON": TestId("login-button"),
    "ERROR_MESSAGE": TestId("error-message"),
    "SUCCESS_MESSAGE": TestId("success-message"),
    "FORGOT_PASSWORD_LINK": TestId("forgot-password-link"),
    "REMEMBER_ME_CHECKBOX": TestId("remember-me-checkbox"),
    "LOGIN_FORM": TestId("login-form"),
    "VALIDATION_ERROR": TestId("validation-error"),
    "FIRST_ATTEMPT_LABEL": Text("Intentos: 1/"),
    "TOAST_MESSAGE": TestId("toast-message"),
    "BLOCKED_USER": TestId("blocked-message"),
}

DASHBOARD_LOCATORS = {
    "APP_HEADING": Text("UI Test App"),
    "USER_MENU": TestId("user-menu"),
    "LOGOUT_BUTTON": TestId("logout-button"),
    "SIDEBAR_NAV": TestId("sidebar-navigation"),
    "MAIN_CONTENT": TestId("main-content"),
    "WELCOME_MESSAGE": TestId("welcome-message"),
    "USER_PROFILE": TestId("user-profile"),
    "DASHBOARD_STATS": TestId("dashboard-stats"),
    "DASHBOARD_TITLE": TestId("dashboard-title"),
}

COMMON_LOCATORS = {
    "LOADING_SPINNER": TestId("loading-spinner"),
    "MODAL_OVERLAY": TestId("modal-overlay"),
    "TOAST_NOTIFICATION": TestId("toast-notification"),
    "BREADCRUMB": TestId("breadcrumb"),
    "PAGINATION": TestId("pagination"),
    "ALERT_MESSAGE": TestId("alert-message"),
    "SUCCESS_ALERT": TestId("success-alert"),
    "ERROR_ALERT": TestId("error-alert"),
    "WARNING_ALERT": TestId("warning-alert"),
}

FORM_LOCATORS = {
    "SUBMIT_BUTTON": TestId("submit-button"),
    "CANCEL_BUTTON": TestId("cancel-button"),
    "RESET_BUTTON": TestId("reset-button"),
    "FORM_VALIDATION_ERROR": TestId("form-validation-error"),
    "FORM_CONTAINER": TestId("form-container"),
    "REQUIRED_FIELD_INDICATOR": TestId("required-field"),
    "FIELD_HELP_TEXT": TestId("field-help-text"),
}

NAVIGATION_LOCATORS = {
    "HOME_LINK": TestId("home-link"),
    "SETTINGS_LINK": TestId("settings-link"),
    "PROFILE_LINK": TestId("profile-link"),
    "HELP_LINK": TestId("help-link"),
    "NAVIGATION_MENU": TestId("navigation-menu"),
    "BURGER_MENU": TestId("burger-menu"),
    "MOBILE_MENU": TestId("mobile-menu"),
}

REGISTRATION_LOCATORS = {
    "FIRST_NAME_INPUT": TestId("first-name-input"),
    "LAST_NAME_INPUT": TestId("last-name-input"),
    "EMAIL_INPUT": LOGIN_LOCATORS["EMAIL_INPUT"],
    "PASSWORD_INPUT": LOGIN_LOCATORS["PASSWORD_INPUT"],
    "CONFIRM_PASSWORD_INPUT": TestId("confirm-password-input"),
    "REGISTER_BUTTON": TestId("register-button"),
    "TERMS_CHECKBOX": TestId("terms-checkbox"),
    "PRIVACY_CHECKBOX": TestId("privacy-checkbox"),
    "REGISTRATION_FORM": TestId("registration-form"),
}

PROFILE_LOCATORS = {
    "PROFILE_HEADER": TestId("profile-header"),
    "EDIT_PROFILE_BUTTON": TestId("edit-profile-button"),
    "SAVE_PROFILE_BUTTON": TestId("save-profile-button"),
    "PROFILE_AVATAR": TestId("profile-avatar"),
    "PROFILE_INFO": TestId("profile-info"),
    "CHANGE_PASSWORD_LINK": TestId("change-password-link"),
    "DELETE_ACCOUNT_BUTTON": TestId("delete-account-button"),
}

SETTINGS_LOCATORS = {
    "SETTINGS_HEADER": TestId("settings-header"),
    "NOTIFICATION_TOGGLE": TestId("notification-toggle"),
    "EMAIL_NOTIFICATIONS": TestId("email-notifications"),
    "PUSH_NOTIFICATIONS": TestId("push-notifications"),
    "PRIVACY_SETTINGS": TestId("privacy-settings"),
    "LANGUAGE_SELECTOR": TestId("language-selector"),
    "THEME_SELECTOR": TestId("theme-selector"),
    "SAVE_SETTINGS_BUTTON": TestId("save-settings-button"),
}

# Merge order for the flattened view
LOCATOR_CATEGORIES = {
    "LOGIN": LOGIN_LOCATORS,
    "DASHBOARD": DASHBOARD_LOCATORS,
    "COMMON": COMMON_LOCATORS,
    "FORM": FORM_LOCATORS,
    "NAVIGATION": NAVIGATION_LOCATORS,
    "REGISTRATION": REGISTRATION_LOCATORS,
    "PROFILE": PROFILE_LOCATORS,
    "SETTINGS": SETTINGS_LOCATORS,
}

# Legacy names kept for older tests
SELECTORS = {
    "EMAIL_INPUT": LOGIN_LOCATORS["EMAIL_INPUT"],
    "PASSWORD_INPUT": LOGIN_LOCATORS["PASSWORD_INPUT"],
    "LOGIN_BUTTON": LOGIN_LOCATORS["LOGIN_BUTTON"],
}
