"""Page objects built on the locator registry."""

from .base_page import BasePage
from .dashboard_page import DashboardPage
from .login_page import LoginPage

__all__ = ["BasePage", "DashboardPage", "LoginPage"]
