"""
Trap service routines (console I/O and HALT).

The routines run in the host rather than as LC-3 code in a trap vector
table: a TRAP instruction calls straight into one of the functions below.
Each routine takes the machine and leaves the PC alone.
"""
import logging
from types import MappingProxyType

from .bits import WORD_MASK
from .consts import MEMORY_SIZE, TrapVector
from .errors import UnknownTrap, UnterminatedString

logger = logging.getLogger(__name__)


def _string_words(cpu):
    """Words from the address in R0 up to (not including) a zero word.

    Raises UnterminatedString once every address has been visited.
    """
    start = addr = cpu.reg[0]
    for _ in range(MEMORY_SIZE):
        word = cpu.mem.peek(addr)
        if word == 0:
            return
        yield word
        addr = (addr + 1) & WORD_MASK
    raise UnterminatedString(f"no terminating zero word from x{start:04X}")


def trap_getc(cpu):
    cpu.reg[0] = cpu.console.read_key()


def trap_out(cpu):
    cpu.console.write(chr(cpu.reg[0] & 0xFF))
    cpu.console.flush()


def trap_puts(cpu):
    cpu.console.write("".join(chr(w & 0xFF) for w in _string_words(cpu)))
    cpu.console.flush()


def trap_in(cpu):
    cpu.console.write(cpu.config.in_prompt)
    cpu.console.flush()
    c = cpu.console.read_key()
    cpu.console.write(chr(c & 0xFF) + "\n")
    cpu.console.flush()
    cpu.reg[0] = c


def trap_putsp(cpu):
    chars = []
    for word in _string_words(cpu):
        chars.append(chr(word & 0xFF))
        hi = word >> 8
        if hi:
            chars.append(chr(hi))
    cpu.console.write("".join(chars))
    cpu.console.flush()


def trap_halt(cpu):
    cpu.console.write(cpu.config.halt_message + "\n")
    cpu.console.flush()
    cpu.halt()


TRAP_TABLE = MappingProxyType({
    TrapVector.GETC:  trap_getc,
    TrapVector.OUT:   trap_out,
    TrapVector.PUTS:  trap_puts,
    TrapVector.IN:    trap_in,
    TrapVector.PUTSP: trap_putsp,
    TrapVector.HALT:  trap_halt,
})


def dispatch_trap(cpu, instr):
    vector = instr & 0xFF
    routine = TRAP_TABLE.get(vector)
    if routine is None:
        raise UnknownTrap(vector)
    logger.debug("TRAP x%02X (%s)", vector, routine.__name__)
    routine(cpu)
