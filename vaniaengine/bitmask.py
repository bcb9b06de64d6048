"""A 32-bit mask of boolean flags."""

from __future__ import annotations

_WIDTH_MASK = 0xFFFFFFFF


class BitMask:
    """Holds up to 32 on/off flags packed into one unsigned integer."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        self._bits = bits & _WIDTH_MASK

    @property
    def bits(self) -> int:
        """The mask as an unsigned 32-bit integer."""
        return self._bits

    def set_mask(self, other: BitMask) -> None:
        """Overwrite this mask with the bits of another."""
        self._bits = other.bits

    def get_bit(self, pos: int) -> bool:
        """Return True if the bit at ``pos`` is set."""
        return bool(self._bits & (1 << pos))

    def set_bit(self, pos: int, value: bool = True) -> None:
        """Set the bit at ``pos`` to ``value``."""
        if value:
            self._bits = (self._bits | (1 << pos)) & _WIDTH_MASK
        else:
            self.clear_bit(pos)

    def clear_bit(self, pos: int) -> None:
        """Set the bit at ``pos`` to zero."""
        self._bits &= ~(1 << pos) & _WIDTH_MASK

    def clear(self) -> None:
        """Set every bit to zero."""
        self._bits = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitMask):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"BitMask({self._bits:#x})"