"""Pytest plugin to capture screenshots and HTML snapshots on test failure.

Enable with ``pytest -p locator_warden.plugins.capture``.
"""

import logging
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError

from ..capture.screenshots import save_html_snapshot, take_screenshot

logger = logging.getLogger(__name__)

FIXTURE_NAMES = ["page", "browser_page"]


def pytest_addoption(parser):
    parser.addoption(
        "--artifacts-dir",
        action="store",
        default="test-results",
        help="Directory for failure screenshots and HTML snapshots",
    )


def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    if call.when == "call" and call.excinfo is not None:
        _capture_artifacts(item)


def _find_page(item):
    """Find a Playwright page among the test's fixtures."""
    funcargs = getattr(item, "funcargs", {}) or {}
    for name in FIXTURE_NAMES:
        if name in funcargs:
            return funcargs[name]
    return None


def _capture_artifacts(item) -> None:
    """Capture screenshot and HTML snapshot from the test's page."""
    page = _find_page(item)
    if page is None:
        return

    results_dir = Path(item.config.getoption("--artifacts-dir"))
    clean_name = item.name.replace("::", "_").replace("/", "_").replace("[", "_").replace("]", "")

    # Artifact capture must not mask the real test failure
    try:
        screenshot = take_screenshot(page, clean_name, results_dir)
        snapshot = save_html_snapshot(page, clean_name, results_dir)
    except (PlaywrightError, OSError) as e:
        logger.warning("Could not capture artifacts for %s: %s", item.nodeid, e)
        return

    item.user_properties.append(("screenshot_path", str(screenshot)))
    item.user_properties.append(("snapshot_path", str(snapshot)))
