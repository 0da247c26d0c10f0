"""Locator descriptors - symbolic, document-independent element references."""

from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import UnsupportedDescriptorKind


@dataclass(frozen=True)
class _Descriptor:
    """Common base for the four descriptor kinds."""

    value: str

    # Name used by the object-literal form: { type: 'testid', value: ... }
    kind = ""

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"{type(self).__name__} value must be a non-empty string")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class TestId(_Descriptor):
    """Locate by the data-testid attribute."""

    __test__ = False  # keep pytest from collecting this class
    kind = "testid"


@dataclass(frozen=True)
class Text(_Descriptor):
    """Locate by visible text (substring match)."""

    kind = "text"


@dataclass(frozen=True)
class Css(_Descriptor):
    """Locate by a raw CSS selector (legacy form)."""

    kind = "css"


@dataclass(frozen=True)
class XPath(_Descriptor):
    """Locate by an XPath expression."""

    kind = "xpath"


Descriptor = TestId | Text | Css | XPath

DESCRIPTOR_KINDS: dict[str, type[_Descriptor]] = {
    cls.kind: cls for cls in (TestId, Text, Css, XPath)
}

TESTID_ATTRIBUTE = "data-testid"


def coerce(raw: object) -> Descriptor:
    """
    Convert a raw locator value into a descriptor.

    Accepts a descriptor (returned as-is), a bare string (treated as CSS
    for backward compatibility) or a ``{"type": ..., "value": ...}`` mapping.

    Raises:
        UnsupportedDescriptorKind: if the value has no known interpretation
    """
    if isinstance(raw, (TestId, Text, Css, XPath)):
        return raw
    if isinstance(raw, str):
        return Css(raw)
    if isinstance(raw, Mapping):
        cls = DESCRIPTOR_KINDS.get(str(raw.get("type", "")).lower())
        if cls is not None and "value" in raw:
            return cls(raw["value"])
        raise UnsupportedDescriptorKind(dict(raw))
    raise UnsupportedDescriptorKind(raw)


def render(descriptor: Descriptor) -> str:
    """Render a descriptor as its canonical selector string."""
    if isinstance(descriptor, TestId):
        return f'[{TESTID_ATTRIBUTE}="{descriptor.value}"]'
    if isinstance(descriptor, Text):
        return f"text={descriptor.value}"
    if isinstance(descriptor, XPath):
        return f"xpath={descriptor.value}"
    if isinstance(descriptor, Css):
        return descriptor.value
    raise UnsupportedDescriptorKind(descriptor)
