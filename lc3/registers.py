from dataclasses import dataclass, field
from typing import List, Tuple

from .bits import WORD_MASK
from .consts import GENERAL_REGS, PC_START, CondFlag


def classify(value: int) -> CondFlag:
    """NZP classification of a 16-bit word."""
    if value == 0:
        return CondFlag.ZRO
    if value & 0x8000:
        return CondFlag.NEG
    return CondFlag.POS


@dataclass
class Registers:
    """R0..R7 plus PC and COND. COND starts as ZRO, matching the zeroed GPRs."""
    gpr: List[int] = field(default_factory=lambda: [0]*GENERAL_REGS)
    pc: int = PC_START
    cond: int = int(CondFlag.ZRO)

    def __getitem__(self, idx: int) -> int:
        if 0 <= idx < GENERAL_REGS:
            return self.gpr[idx]
        raise IndexError("Invalid register index")

    def __setitem__(self, idx: int, value: int) -> None:
        if 0 <= idx < GENERAL_REGS:
            self.gpr[idx] = value & WORD_MASK
        else:
            raise IndexError("Invalid register index")

    def set_register_and_flag(self, idx: int, value: int) -> None:
        """Store into a general register and update COND from the stored value."""
        self[idx] = value
        self.cond = int(classify(self.gpr[idx]))

    def cond_flag(self) -> CondFlag:
        return CondFlag(self.cond)

    def snapshot(self) -> Tuple[int, ...]:
        """(R0..R7, PC, COND) for display."""
        return (*self.gpr, self.pc, self.cond)
