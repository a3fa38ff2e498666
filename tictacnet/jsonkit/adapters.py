"""Sinks that serialised JSON text is written into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any

__all__ = [
    "OutputAdapter",
    "ListOutputAdapter",
    "StreamOutputAdapter",
    "StringOutputAdapter",
    "output_adapter",
]


class OutputAdapter(ABC):
    """Something that accepts characters one at a time or in runs."""

    @abstractmethod
    def write_character(self, c: Any) -> None:
        """Write one character."""

    @abstractmethod
    def write_characters(self, s: Iterable[Any]) -> None:
        """Write a run of characters."""


class ListOutputAdapter(OutputAdapter):
    """Appends characters to a mutable sequence such as a list or bytearray."""

    def __init__(self, target: MutableSequence) -> None:
        self.target = target

    def write_character(self, c: Any) -> None:
        self.target.append(c)

    def write_characters(self, s: Iterable[Any]) -> None:
        self.target.extend(s)


class StreamOutputAdapter(OutputAdapter):
    """Writes characters to a file-like object."""

    def __init__(self, stream: Any) -> None:
        self.stream = stream

    def write_character(self, c: Any) -> None:
        self.stream.write(c)

    def write_characters(self, s: Any) -> None:
        self.stream.write(s)


class StringOutputAdapter(OutputAdapter):
    """Collects characters into a string."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write_character(self, c: str) -> None:
        self._parts.append(c)

    def write_characters(self, s: str) -> None:
        self._parts.append(s)

    def value(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)


def output_adapter(target: Any = None) -> OutputAdapter:
    """Return the adapter that fits ``target``.

    None gives a fresh string adapter, a mutable sequence a list adapter and
    anything with a ``write`` method a stream adapter.
    """
    if isinstance(target, OutputAdapter):
        return target
    if target is None:
        return StringOutputAdapter()
    if isinstance(target, MutableSequence):
        return ListOutputAdapter(target)
    if callable(getattr(target, "write", None)):
        return StreamOutputAdapter(target)
    raise TypeError(f"cannot write JSON output to {type(target).__name__}")