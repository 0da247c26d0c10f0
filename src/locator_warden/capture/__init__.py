"""Capture module for test artifacts."""

from .screenshots import save_html_snapshot, screenshot_path, take_screenshot, wait_for_page_load

__all__ = ["save_html_snapshot", "screenshot_path", "take_screenshot", "wait_for_page_load"]
