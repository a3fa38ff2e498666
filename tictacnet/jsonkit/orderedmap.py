"""A mapping that keeps its keys in insertion order and never reorders them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

__all__ = ["OrderedMap"]


class OrderedMap(MutableMapping):
    """Keys stay in the order they were first inserted.

    Inserting a key that is already present never moves it or replaces its
    value, except through item assignment, which replaces the value in place.
    """

    def __init__(self, items: Mapping | Iterable[tuple[Any, Any]] | None = None) -> None:
        self._data: dict[Any, Any] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert(key, value)

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: Any) -> None:
        if key not in self._data:
            raise KeyError(key)
        del self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"OrderedMap({list(self._data.items())!r})"

    def emplace(self, key: Any, value: Any) -> tuple[Any, bool]:
        """Add ``key`` at the end unless present.

        Returns the value now stored under the key and whether it was added.
        """
        if key in self._data:
            return self._data[key], False
        self._data[key] = value
        return value, True

    def at(self, key: Any) -> Any:
        """Return the value under ``key``; a missing key raises KeyError."""
        try:
            return self._data[key]
        except KeyError:
            raise KeyError(f"key not found: {key!r}") from None

    def count(self, key: Any) -> int:
        """Return 1 when the key is present and 0 otherwise."""
        return 1 if key in self._data else 0

    def erase_range(self, first: int, last: int) -> int:
        """Remove the entries at positions ``first`` up to but not including ``last``.

        Returns ``first``, the position of the entry that followed the range.
        """
        if not 0 <= first <= last <= len(self._data):
            raise IndexError(f"invalid range {first}..{last} for {len(self._data)} entries")
        if first == last:
            return first
        kept = list(self._data.items())
        del kept[first:last]
        self._data = dict(kept)
        return first

    def insert(self, key: Any, value: Any) -> tuple[Any, bool]:
        """Same as :meth:`emplace`: an existing key keeps its value."""
        return self.emplace(key, value)