"""Offline checkers that lint the test suite's own sources."""

from .console import validate_console_clean
from .locators import extract_descriptors, find_duplicates, find_hardcoded_selectors, validate_locators
from .naming import validate_naming

__all__ = [
    "extract_descriptors",
    "find_duplicates",
    "find_hardcoded_selectors",
    "validate_console_clean",
    "validate_locators",
    "validate_naming",
]
