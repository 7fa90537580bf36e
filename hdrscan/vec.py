"""Small container helpers: ranges, frame indices, ring buffers and bit flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, MutableSequence, TypeVar

T = TypeVar("T")

WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1


@dataclass(frozen=True)
class Range:
    """An inclusive span of unsigned indices."""

    min: int
    max: int


@dataclass(frozen=True)
class FrameIndex:
    """Identifies a frame slot and whether it belongs to the swap set."""

    frame_index: int
    is_swap: bool = False


class RingBuffer(Generic[T]):
    """Fixed-capacity buffer that wraps around and overwrites from the start."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[T] = []
        self._position = 0

    @property
    def position(self) -> int:
        """Number of items written since the last wrap."""
        return self._position

    def add(self, item: T) -> None:
        """Store an item, wrapping to the first slot once the buffer is full."""
        if self._position >= self.capacity:
            self._position = 0
        if self._position < len(self._slots):
            self._slots[self._position] = item
        else:
            self._slots.append(item)
        self._position += 1

    def items(self) -> list[T]:
        """Return the stored items in slot order."""
        return list(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, items={self._slots!r})"


def extend_to_index(items: MutableSequence[Any], index: int, fill: Any) -> None:
    """Grow ``items`` with ``fill`` so that ``index`` is a valid position."""
    if index < 0:
        raise ValueError("index must not be negative")
    missing = index + 1 - len(items)
    if missing > 0:
        items.extend([fill] * missing)


def remove_at(items: MutableSequence[T], index: int) -> T:
    """Remove and return the element at ``index``, shifting later ones down."""
    if not items:
        raise IndexError("Len should be bigger then 0 when Remove is used")
    if index < 0 or index >= len(items):
        raise IndexError(f"index {index} out of range for length {len(items)}")
    return items.pop(index)


@dataclass
class Bitflag:
    """A growable set of bits stored in 64-bit words."""

    words: list[int] = field(default_factory=list)

    @staticmethod
    def _locate(bit: int) -> tuple[int, int]:
        if bit < 0:
            raise ValueError("bit must not be negative")
        return divmod(bit, WORD_BITS)

    def set(self, bit: int) -> None:
        """Turn the given bit on, growing storage as needed."""
        word, offset = self._locate(bit)
        extend_to_index(self.words, word, 0)
        self.words[word] |= 1 << offset

    def clear(self, bit: int) -> None:
        """Turn the given bit off."""
        word, offset = self._locate(bit)
        if word < len(self.words):
            self.words[word] &= ~(1 << offset) & _WORD_MASK

    def is_set(self, bit: int) -> bool:
        """Tell whether the given bit is on."""
        word, offset = self._locate(bit)
        if word >= len(self.words):
            return False
        return bool(self.words[word] >> offset & 1)