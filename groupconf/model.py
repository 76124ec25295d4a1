"""
Parsed configuration model: Document -> Group -> Item.

All three are read-only once built. Lookups never raise for a missing
name: get()/group() return None and get_or() returns the caller's
default. Indexing with [] raises KeyError for callers who prefer that.
"""

import dataclasses
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from . import casts


@dataclasses.dataclass(frozen=True)
class Item:
    """A single configuration value.

    The value is stored exactly as normalized (quotes stripped, trimmed).
    Typed accessors convert it on every call; nothing is cached.
    """

    key: str
    value: str

    def __str__(self) -> str:
        return self.value

    def as_str(self) -> str:
        return casts.to_str(self.value)

    def as_i32(self) -> int:
        return casts.to_i32(self.value)

    def as_u32(self) -> int:
        return casts.to_u32(self.value)

    def as_i64(self) -> int:
        return casts.to_i64(self.value)

    def as_u64(self) -> int:
        return casts.to_u64(self.value)

    def as_f32(self) -> float:
        return casts.to_f32(self.value)

    def as_f64(self) -> float:
        return casts.to_f64(self.value)

    as_int = as_i64
    as_float = as_f64

    def as_bool(self) -> bool:
        """Raises InvalidBoolValue for tokens outside the boolean tables."""
        return casts.to_bool(self.value)

    def as_bool_lenient(self) -> bool:
        """False for anything that isn't a recognised true token."""
        return casts.to_bool_lenient(self.value)


class Group:
    """A named section with its items in source order."""

    __slots__ = ("_name", "_items")

    def __init__(self, name: str, pairs: Optional[Mapping[str, str]] = None):
        self._name = name
        self._items: Dict[str, Item] = {}
        if pairs:
            for key, value in pairs.items():
                self._items[key] = Item(key, value)

    @property
    def name(self) -> str:
        return self._name

    def get(self, key: str) -> Optional[Item]:
        """Return the Item for ``key``, or None if absent."""
        return self._items.get(key)

    def get_or(self, key: str, default: str) -> str:
        """Return the stored value for ``key``, or ``default`` verbatim."""
        item = self._items.get(key)
        return default if item is None else item.value

    def has(self, key: str) -> bool:
        return key in self._items

    def keys(self) -> List[str]:
        return list(self._items)

    def for_each(self) -> Iterator[Item]:
        """Iterate over the Items in insertion order."""
        for item in self._items.values():
            yield item

    def to_dict(self) -> Dict[str, str]:
        return {key: item.value for key, item in self._items.items()}

    def __getitem__(self, key: str) -> Item:
        return self._items[key]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return (self._name == other._name
                and list(self._items.items()) == list(other._items.items()))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Group({self._name!r}, {self.to_dict()!r})"


class Document:
    """The whole parsed configuration, groups in source order."""

    __slots__ = ("_groups",)

    def __init__(self, groups: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._groups: Dict[str, Group] = {}
        if groups:
            for name, pairs in groups.items():
                self._groups[name] = Group(name, pairs)

    def group(self, name: str) -> Optional[Group]:
        """Return the Group called ``name``, or None if absent."""
        return self._groups.get(name)

    def has_group(self, name: str) -> bool:
        return name in self._groups

    def groups(self) -> List[str]:
        return list(self._groups)

    def for_each_group(self) -> Iterator[Tuple[str, Group]]:
        """Iterate over (name, Group) pairs in insertion order."""
        for name, group in self._groups.items():
            yield name, group

    def get(self, group: str, key: str) -> Optional[Item]:
        """Shortcut for ``group(group).get(key)``; a missing group is a miss."""
        found = self._groups.get(group)
        return None if found is None else found.get(key)

    def get_or(self, group: str, key: str, default: str) -> str:
        found = self._groups.get(group)
        return default if found is None else found.get_or(key, default)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {name: group.to_dict() for name, group in self._groups.items()}

    def __getitem__(self, name: str) -> Group:
        return self._groups[name]

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return list(self._groups.items()) == list(other._groups.items())

    __hash__ = None

    def __repr__(self) -> str:
        return f"Document({self.to_dict()!r})"
