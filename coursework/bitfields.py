"""Decoding a 16-bit protocol word and single-bit manipulation."""

from __future__ import annotations

from dataclasses import dataclass

_TYPE_BITS = 6
_PRIORITY_BITS = 3
_ID_BITS = 7
_WORD_BITS = _TYPE_BITS + _PRIORITY_BITS + _ID_BITS


@dataclass(frozen=True)
class ProtFields:
    """The fields of a protocol word: 6-bit type, 3-bit priority, 7-bit id."""

    type: int
    priority: int
    id: int

    def __post_init__(self) -> None:
        for name, bits in (
            ("type", _TYPE_BITS),
            ("priority", _PRIORITY_BITS),
            ("id", _ID_BITS),
        ):
            value = getattr(self, name)
            if not 0 <= value < (1 << bits):
                raise ValueError(f"{name} {value} does not fit in {bits} bits")

    def pack(self) -> int:
        """Combine the fields back into a 16-bit word."""
        return (
            (self.type << (_PRIORITY_BITS + _ID_BITS))
            | (self.priority << _ID_BITS)
            | self.id
        )


def decode_prot(value: int) -> ProtFields:
    """Split a 16-bit word into its type, priority and id fields."""
    if not 0 <= value < (1 << _WORD_BITS):
        raise ValueError(f"{value} is not a 16-bit value")
    return ProtFields(
        type=value >> (_PRIORITY_BITS + _ID_BITS),
        priority=(value >> _ID_BITS) & ((1 << _PRIORITY_BITS) - 1),
        id=value & ((1 << _ID_BITS) - 1),
    )


def to_binary(value: int, width: int = _WORD_BITS) -> str:
    """Return ``value`` as a string of ``width`` binary digits, most significant first."""
    if width <= 0:
        raise ValueError("width must be positive")
    if not 0 <= value < (1 << width):
        raise ValueError(f"{value} does not fit in {width} bits")
    return format(value, f"0{width}b")


def _mask(bit: int) -> int:
    if bit < 0:
        raise ValueError("bit position must not be negative")
    return 1 << bit


def set_bit(value: int, bit: int) -> int:
    """Return ``value`` with the given bit set to 1."""
    return value | _mask(bit)


def clear_bit(value: int, bit: int) -> int:
    """Return ``value`` with the given bit set to 0."""
    return value & ~_mask(bit)


def flip_bit(value: int, bit: int) -> int:
    """Return ``value`` with the given bit inverted."""
    return value ^ _mask(bit)


def test_bit(value: int, bit: int) -> bool:
    """Return True if the given bit of ``value`` is 1."""
    return bool(value & _mask(bit))