"""Bit-field helpers shared by the decoder, the handlers and the disassembler."""

WORD_MASK = 0xFFFF


def extract(word: int, start: int, width: int) -> int:
    """Return `width` bits of `word` starting at bit `start` (LSB = 0)."""
    return (word >> start) & ((1 << width) - 1)


def sign_extend(value: int, width: int) -> int:
    """
    Widen a `width`-bit two's-complement field to a 16-bit word.
    e.g. sign_extend(0b11111, 5) == 0xFFFF
    """
    value &= (1 << width) - 1
    if (value >> (width - 1)) & 1:
        value |= (WORD_MASK << width) & WORD_MASK
    return value


def to_word(value: int) -> int:
    return value & WORD_MASK


def to_signed(word: int) -> int:
    """Interpret a 16-bit word as a signed integer."""
    word &= WORD_MASK
    return word - 0x10000 if word & 0x8000 else word
