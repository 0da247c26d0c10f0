"""Resolve descriptors against a Playwright page."""

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from .descriptors import Css, Descriptor, TestId, Text, XPath, coerce, render

logger = logging.getLogger(__name__)


def resolve(page: Page, descriptor: Descriptor | str | dict) -> Locator:
    """
    Turn a descriptor into a Playwright locator.

    Resolution never waits or asserts; the returned locator is lazy and
    re-queries the page on each action.

    Raises:
        UnsupportedDescriptorKind: raised before the page is touched
    """
    descriptor = coerce(descriptor)

    if isinstance(descriptor, TestId):
        return page.locator(render(descriptor))
    if isinstance(descriptor, Text):
        return page.get_by_text(descriptor.value)
    if isinstance(descriptor, XPath):
        return page.locator(render(descriptor))
    if isinstance(descriptor, Css):
        return page.locator(descriptor.value)
    # coerce() only returns the four kinds above
    raise AssertionError(f"unreachable descriptor: {descriptor!r}")


def click_with_retry(
    page: Page,
    descriptor: Descriptor | str | dict,
    max_attempts: int = 3,
    timeout: float | None = None,
    backoff: float = 1.0,
) -> None:
    """
    Resolve, wait for visibility and click, retrying transient failures.

    Args:
        page: Playwright page
        descriptor: element to click
        max_attempts: total attempts; values below 1 count as 1
        timeout: per-attempt visibility timeout in milliseconds
        backoff: fixed pause between attempts in seconds

    Raises:
        The last Playwright error, unchanged, once all attempts fail.
    """
    descriptor = coerce(descriptor)
    attempts = max(max_attempts, 1)

    for attempt in Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(backoff),
        retry=retry_if_exception_type(PlaywrightError),
        before_sleep=lambda state: logger.debug(
            "Click on %s failed (attempt %d/%d): %s",
            render(descriptor), state.attempt_number, attempts, state.outcome.exception(),
        ),
        reraise=True,
    ):
        with attempt:
            locator = resolve(page, descriptor)
            locator.wait_for(state="visible", timeout=timeout)
            locator.click(timeout=timeout)
