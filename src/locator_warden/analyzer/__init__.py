"""Offline analysis of saved HTML snapshots."""

from .coverage import CoverageEntry, measure_coverage, validate_coverage
from .html_parser import DOMElement, HTMLParser

__all__ = ["CoverageEntry", "DOMElement", "HTMLParser", "measure_coverage", "validate_coverage"]
