"""Architectural constants of the LC-3."""
from enum import IntEnum, IntFlag

MEMORY_SIZE = 1 << 16   # 65536 addressable 16-bit words
PC_START    = 0x3000    # default load/start address for user programs

# memory-mapped keyboard registers
MR_KBSR = 0xFE00        # keyboard status (bit 15 = key ready)
MR_KBDR = 0xFE02        # keyboard data
KBSR_READY = 0x8000


class Register(IntEnum):
    R0 = 0
    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5
    R6 = 6
    R7 = 7
    PC = 8
    COND = 9


GENERAL_REGS  = 8
REGISTER_NAMES = [r.name for r in Register]


class Opcode(IntEnum):
    """Top nibble of every instruction word."""
    BR   = 0b0000
    ADD  = 0b0001
    LD   = 0b0010
    ST   = 0b0011
    JSR  = 0b0100
    AND  = 0b0101
    LDR  = 0b0110
    STR  = 0b0111
    RTI  = 0b1000
    NOT  = 0b1001
    LDI  = 0b1010
    STI  = 0b1011
    JMP  = 0b1100
    RES  = 0b1101
    LEA  = 0b1110
    TRAP = 0b1111


class TrapVector(IntEnum):
    GETC  = 0x20   # read a key, no echo
    OUT   = 0x21   # write R0 as a character
    PUTS  = 0x22   # write a one-char-per-word string
    IN    = 0x23   # prompt, read a key, echo
    PUTSP = 0x24   # write a two-chars-per-word string
    HALT  = 0x25


class CondFlag(IntFlag):
    """NZP bits; the layout matches the BR condition mask in bits [11:9]."""
    POS = 1 << 0
    ZRO = 1 << 1
    NEG = 1 << 2
