"""A byte string with an optional numeric subtype."""

from __future__ import annotations

__all__ = ["NO_SUBTYPE", "ByteContainer"]

NO_SUBTYPE = (1 << 64) - 1


class ByteContainer(bytearray):
    """Mutable bytes that may carry a subtype tag, as binary JSON formats do."""

    def __init__(self, data: bytes | bytearray | list[int] = b"", subtype: int | None = None) -> None:
        super().__init__(data)
        self._subtype = 0
        self._has_subtype = False
        if subtype is not None:
            self.set_subtype(subtype)

    def set_subtype(self, subtype: int) -> None:
        """Set the subtype tag."""
        self._subtype = subtype
        self._has_subtype = True

    def subtype(self) -> int:
        """Return the subtype, or NO_SUBTYPE when none is set."""
        return self._subtype if self._has_subtype else NO_SUBTYPE

    def has_subtype(self) -> bool:
        """Tell whether a subtype is set."""
        return self._has_subtype

    def clear_subtype(self) -> None:
        """Remove the subtype tag."""
        self._subtype = 0
        self._has_subtype = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteContainer):
            return NotImplemented
        return (bytes(self), self._subtype, self._has_subtype) == (
            bytes(other),
            other._subtype,
            other._has_subtype,
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._has_subtype:
            return f"ByteContainer({bytes(self)!r}, subtype={self._subtype})"
        return f"ByteContainer({bytes(self)!r})"