"""Mutable text storage, views into it, and the owned-buffer allocator."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Optional

from strkit.runtime import telemetry
from strkit.runtime.telemetry import OperationSpan

from .units import NUL_UNIT


class TextBuffer:
    """Fixed-capacity byte storage with a logical length.

    The storage ``bytearray`` is never resized or replaced once the buffer
    exists; mutations rewrite units in place and may only shrink ``length``.
    Units past ``length`` are kept at ``NUL_UNIT`` so the end of the content
    is also materialized in storage.
    """

    __slots__ = ("name", "version", "_storage", "_length")

    def __init__(
        self,
        storage: Optional[bytearray] = None,
        *,
        length: Optional[int] = None,
        name: str = "default",
    ) -> None:
        self.name = name
        self.version = 0
        self._storage = storage if storage is not None else bytearray()
        if length is None:
            end = self._storage.find(NUL_UNIT)
            length = len(self._storage) if end < 0 else end
        self._length = max(0, min(length, len(self._storage)))

    @classmethod
    def from_text(
        cls, text: bytes | str, *, capacity: int = 0, name: str = "default"
    ) -> "TextBuffer":
        """Copy ``text`` into fresh storage of at least ``capacity`` units."""

        data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        storage = bytearray(max(len(data), capacity))
        storage[: len(data)] = data
        return cls(storage, length=len(data), name=name)

    @property
    def storage(self) -> bytearray:
        return self._storage

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return (
            f"TextBuffer(name={self.name!r}, content={self.snapshot()!r}, "
            f"capacity={self.capacity}, version={self.version})"
        )

    def snapshot(self) -> bytes:
        """Return the logical content as an independent ``bytes`` copy."""

        return bytes(self._storage[: self._length])

    def view(self, offset: int = 0, length: Optional[int] = None) -> "TextView":
        if length is None:
            length = self._length - offset
        return TextView(
            buffer=self, offset=offset, length=length, version=self.version
        )

    def mutate(self, label: str) -> "Mutation":
        return Mutation(self, label)


@dataclass(frozen=True, slots=True, eq=False)
class TextView:
    """Window ``[offset, offset + length)`` into a ``TextBuffer``'s storage."""

    buffer: TextBuffer
    offset: int
    length: int
    version: int

    @property
    def is_current(self) -> bool:
        """False once the underlying buffer has been mutated again."""

        return self.version == self.buffer.version

    def to_bytes(self) -> bytes:
        return bytes(self.buffer.storage[self.offset : self.offset + self.length])

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return self.to_bytes() == other.to_bytes()
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.to_bytes() == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"TextView({self.to_bytes()!r}, offset={self.offset}, "
            f"buffer={self.buffer.name!r})"
        )


class Mutation(AbstractContextManager["Mutation"]):
    """Scope for one in-place operation on a ``TextBuffer``.

    Writes are bounded by the buffer's capacity. ``commit`` bumps the
    buffer version and returns a view over the resulting content.
    """

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[OperationSpan]] = None
        self.span: Optional[OperationSpan] = None

    def __enter__(self) -> "Mutation":
        self._span_cm = telemetry.span(
            self.label,
            component="text_buffer",
            metadata={"buffer": self.buffer.name, "length": self.buffer.length},
        )
        self.span = self._span_cm.__enter__()
        return self

    def write(self, offset: int, units: bytes) -> None:
        end = offset + len(units)
        if offset < 0 or end > self.buffer.capacity:
            raise IndexError(
                f"write [{offset}, {end}) exceeds capacity {self.buffer.capacity}"
            )
        self.buffer.storage[offset:end] = units

    def set_unit(self, index: int, unit: int) -> None:
        if not 0 <= index < self.buffer.capacity:
            raise IndexError(f"index {index} exceeds capacity {self.buffer.capacity}")
        self.buffer.storage[index] = unit

    def truncate(self, length: int) -> None:
        """Shrink the logical content to ``length`` units, zeroing the tail."""

        old_length = self.buffer.length
        if length >= old_length:
            return
        length = max(0, length)
        self.buffer.storage[length:old_length] = bytes(old_length - length)
        self.buffer._length = length

    def commit(self) -> TextView:
        self.buffer.version += 1
        if self.span is not None:
            self.span.note("version", self.buffer.version)
        return self.buffer.view()

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def allocate(size: int) -> bytearray:
    """Return zeroed scratch storage of exactly ``size`` units."""

    return bytearray(size)


def build_owned(
    operation: str, size: int, fill: Callable[[bytearray], None]
) -> Optional[bytes]:
    """Allocate ``size`` units, let ``fill`` populate them, return the bytes.

    Returns ``None`` when the units cannot be obtained, including sizes
    past ``sys.maxsize``; nothing partially built escapes.
    """

    try:
        scratch = allocate(size)
    except (MemoryError, OverflowError):
        # OverflowError: size does not fit an index-sized integer
        telemetry.allocation_failed(operation, size)
        return None
    fill(scratch)
    try:
        return bytes(scratch)
    except MemoryError:
        telemetry.allocation_failed(operation, size)
        return None


__all__ = [
    "TextBuffer",
    "TextView",
    "Mutation",
    "allocate",
    "build_owned",
]
