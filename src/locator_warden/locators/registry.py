"""Immutable locator registry built from named descriptor groups."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from ..errors import UnknownLocator
from .descriptors import Descriptor, coerce

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatorGroup:
    """A named, ordered, read-only set of descriptors."""

    name: str
    entries: Mapping[str, Descriptor] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so test code cannot patch locators at runtime
        object.__setattr__(
            self,
            "entries",
            MappingProxyType({key: coerce(value) for key, value in self.entries.items()}),
        )

    def __getitem__(self, key: str) -> Descriptor:
        try:
            return self.entries[key]
        except KeyError:
            raise UnknownLocator(self.name, key) from None

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Shadowing:
    """A flatten collision where a later group replaced a different descriptor."""

    key: str
    hidden: str  # qualified key that lost
    winner: str  # qualified key that won


class Registry:
    """
    Catalog of locator groups.

    Built once and passed to page objects and checkers. There is no
    mutation API; group contents are exposed through read-only mappings.
    """

    def __init__(self, groups: list[LocatorGroup] | tuple[LocatorGroup, ...]):
        names = [group.name for group in groups]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate locator group names: {', '.join(duplicates)}")
        self._groups: Mapping[str, LocatorGroup] = MappingProxyType(
            {group.name: group for group in groups}
        )

    @classmethod
    def from_mapping(cls, groups: Mapping[str, Mapping[str, object]]) -> "Registry":
        """Build a registry from ``{group: {key: descriptor}}`` in declared order."""
        return cls([LocatorGroup(name, entries) for name, entries in groups.items()])

    @property
    def groups(self) -> Mapping[str, LocatorGroup]:
        return self._groups

    def group(self, name: str) -> LocatorGroup:
        """Get a group by name."""
        try:
            return self._groups[name]
        except KeyError:
            raise UnknownLocator(name) from None

    def get(self, group: str, key: str) -> Descriptor:
        """
        Look up a single descriptor.

        Raises:
            UnknownLocator: if the group or the key is absent
        """
        return self.group(group)[key]

    def qualified(self) -> dict[str, Descriptor]:
        """Every entry keyed as ``GROUP.KEY``."""
        return {
            f"{group.name}.{key}": descriptor
            for group in self._groups.values()
            for key, descriptor in group.entries.items()
        }

    def aliases(self) -> list[tuple[str, str]]:
        """
        Entries that reuse a descriptor object declared earlier.

        Returns:
            List of ``(alias_key, canonical_key)`` pairs in declared order
        """
        canonical: dict[int, str] = {}
        pairs = []
        for name, descriptor in self.qualified().items():
            owner = canonical.setdefault(id(descriptor), name)
            if owner != name:
                pairs.append((name, owner))
        return pairs

    def declared(self) -> dict[str, Descriptor]:
        """Qualified entries with aliases removed."""
        alias_keys = {alias for alias, _ in self.aliases()}
        return {
            name: descriptor
            for name, descriptor in self.qualified().items()
            if name not in alias_keys
        }

    def flatten(self) -> dict[str, Descriptor]:
        """
        Merge all groups into a single ``{key: descriptor}`` mapping.

        Later groups win on key collisions, exactly like a shallow dict
        merge. A collision that replaces a *different* descriptor silently
        changes what the bare key resolves to; see ``shadowed()``.
        """
        merged: dict[str, Descriptor] = {}
        for group in self._groups.values():
            merged.update(group.entries)
        for shadow in self.shadowed():
            logger.warning(
                "Locator key %s from %s is shadowed by %s",
                shadow.key, shadow.hidden, shadow.winner,
            )
        return merged

    def shadowed(self) -> list[Shadowing]:
        """Flatten collisions where the winning descriptor differs from the loser."""
        owners: dict[str, tuple[str, Descriptor]] = {}
        found = []
        for group in self._groups.values():
            for key, descriptor in group.entries.items():
                previous = owners.get(key)
                qualified = f"{group.name}.{key}"
                if previous and previous[1] != descriptor:
                    found.append(Shadowing(key=key, hidden=previous[0], winner=qualified))
                owners[key] = (qualified, descriptor)
        return found

    def __iter__(self) -> Iterator[LocatorGroup]:
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Registry built from the packaged catalog, constructed once per process."""
    from .catalog import LOCATOR_CATEGORIES

    return Registry.from_mapping(LOCATOR_CATEGORIES)
