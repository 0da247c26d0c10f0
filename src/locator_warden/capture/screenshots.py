"""Screenshot and HTML snapshot artifacts."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


def artifact_timestamp(now: datetime | None = None) -> str:
    """ISO 8601 timestamp with ':' and '.' replaced so it is filename safe."""
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    iso = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return iso.replace(":", "-").replace(".", "-")


def screenshot_path(name: str, results_dir: Path = Path("test-results"), now: datetime | None = None) -> Path:
    """Path of the screenshot for ``name`` taken at ``now``."""
    return Path(results_dir) / "screenshots" / f"{name}-{artifact_timestamp(now)}.png"


def take_screenshot(page: Page, name: str, results_dir: Path = Path("test-results")) -> Path:
    """Save a full-page screenshot and return its path."""
    path = screenshot_path(name, results_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    page.screenshot(path=str(path), full_page=True)
    logger.debug("Saved screenshot %s", path)
    return path


def save_html_snapshot(page: Page, name: str, results_dir: Path = Path("test-results")) -> Path:
    """Save the page's current HTML next to the screenshots."""
    path = Path(results_dir) / "snapshots" / f"{name}-{artifact_timestamp()}.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(page.content(), encoding="utf-8")
    logger.debug("Saved HTML snapshot %s", path)
    return path


def wait_for_page_load(page: Page) -> None:
    """Wait until the network has been idle."""
    page.wait_for_load_state("networkidle")
