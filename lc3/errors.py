"""Exceptions raised by the LC-3 core."""
from typing import Optional


class LC3Error(Exception):
    """Base class for every error the VM reports."""


class ImageIOError(LC3Error):
    """The program image could not be opened, read, or has no origin word."""


class ConfigError(LC3Error):
    """A machine configuration file is malformed."""


class MachineHalted(LC3Error):
    """step() was called on a machine that already halted or faulted."""


class MachineFault(LC3Error):
    """Fatal execution condition. The machine is left in the FAULTED state."""

    def __init__(self, message: str, address: Optional[int] = None,
                 word: Optional[int] = None):
        super().__init__(message)
        self.address = address
        self.word = word

    def __str__(self):
        msg = super().__str__()
        if self.address is not None:
            msg += f" at x{self.address:04X}"
        return msg


class IllegalInstruction(MachineFault):
    """RTI/RES was executed, or the opcode table has no handler."""


class UnknownTrap(MachineFault):
    """TRAP with a vector outside GETC..HALT."""

    def __init__(self, vector: int, address: Optional[int] = None,
                 word: Optional[int] = None):
        super().__init__(f"unknown trap vector x{vector:02X}", address, word)
        self.vector = vector


class UnterminatedString(MachineFault):
    """PUTS/PUTSP walked all of memory without finding a zero word."""
