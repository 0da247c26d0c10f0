"""Registry coverage against a saved HTML snapshot."""

import logging
from dataclasses import dataclass
from pathlib import Path

from lxml import etree
from soupsieve import SelectorSyntaxError

from ..checkers.sources import read_source
from ..locators.descriptors import Css, Descriptor, TestId, Text, XPath, render
from ..locators.registry import Registry
from ..models import Violation, ViolationKind, ViolationReport
from .html_parser import DOMElement, HTMLParser

logger = logging.getLogger(__name__)


@dataclass
class CoverageEntry:
    """How one registry entry fared against the snapshot."""

    key: str
    selector: str
    matches: int
    error: str | None = None

    @property
    def covered(self) -> bool:
        return self.error is None and self.matches > 0


def match_descriptor(parser: HTMLParser, descriptor: Descriptor) -> list[DOMElement]:
    """Elements in the snapshot a descriptor would resolve to."""
    if isinstance(descriptor, TestId):
        return parser.find_by_data_testid(descriptor.value)
    if isinstance(descriptor, Text):
        return parser.find_by_text(descriptor.value)
    if isinstance(descriptor, XPath):
        return parser.find_by_xpath(descriptor.value)
    if isinstance(descriptor, Css):
        return parser.find_by_css(descriptor.value)
    raise AssertionError(f"unreachable descriptor: {descriptor!r}")


def measure_coverage(registry: Registry, html: str, group: str | None = None) -> list[CoverageEntry]:
    """Count snapshot matches for every declared registry entry."""
    parser = HTMLParser(html)
    prefix = f"{registry.group(group).name}." if group else ""
    entries = []

    for key, descriptor in registry.declared().items():
        if not key.startswith(prefix):
            continue
        try:
            matches = len(match_descriptor(parser, descriptor))
            entries.append(CoverageEntry(key=key, selector=render(descriptor), matches=matches))
        except (SelectorSyntaxError, etree.XPathError) as e:
            logger.debug("Invalid selector for %s: %s", key, e)
            entries.append(CoverageEntry(key=key, selector=render(descriptor), matches=0, error=str(e)))

    return entries


def validate_coverage(registry: Registry, snapshot: Path, group: str | None = None) -> ViolationReport:
    """
    Report registry entries that match nothing in a snapshot.

    Raises:
        FileReadError: if the snapshot cannot be read
        UnknownLocator: if ``group`` is not in the registry
    """
    report = ViolationReport(checker="coverage")
    entries = measure_coverage(registry, read_source(snapshot), group)
    report.scanned = len(entries)

    for entry in entries:
        if entry.covered:
            continue
        report.violations.append(Violation(
            kind=ViolationKind.UNCOVERED,
            locations=(entry.key,),
            detail=entry.error or f"{entry.selector} matches no element in {snapshot.name}",
        ))

    return report
