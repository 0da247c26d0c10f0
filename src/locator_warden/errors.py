"""Exceptions raised by Locator Warden."""

from pathlib import Path


class LocatorWardenError(Exception):
    """Base exception for all Locator Warden errors."""

    pass


class UnknownLocator(LocatorWardenError, KeyError):
    """A registry lookup named a group or key that does not exist."""

    def __init__(self, group: str, key: str | None = None):
        self.group = group
        self.key = key
        if key is None:
            message = f"Unknown locator group: {group}"
        else:
            message = f"Unknown locator: {group}.{key}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class UnsupportedDescriptorKind(LocatorWardenError, TypeError):
    """A value could not be interpreted as a locator descriptor."""

    def __init__(self, value: object):
        self.value = value
        kind = value.get("type") if isinstance(value, dict) else type(value).__name__
        super().__init__(f"Unknown locator type: {kind}")


class FileReadError(LocatorWardenError):
    """A source file required by a checker could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")
