"""Locator descriptors, the registry and the resolver."""

from .descriptors import Css, Descriptor, TestId, Text, XPath, coerce, render
from .registry import LocatorGroup, Registry, default_registry
from .resolver import click_with_retry, resolve

__all__ = [
    "Css",
    "Descriptor",
    "LocatorGroup",
    "Registry",
    "TestId",
    "Text",
    "XPath",
    "click_with_retry",
    "coerce",
    "default_registry",
    "render",
    "resolve",
]
