"""One-word LC-3 disassembler used by the debugger history."""
from typing import Optional

from .bits import extract, sign_extend, to_signed, to_word
from .consts import CondFlag, Opcode, TrapVector


def _target(offset: int, width: int, address: Optional[int]) -> str:
    off = sign_extend(offset, width)
    if address is None:
        return f"#{to_signed(off)}"
    return f"x{to_word(address + 1 + off):04X}"


def _imm_or_reg(word: int) -> str:
    if (word >> 5) & 1:
        return f"#{to_signed(sign_extend(word & 0x1F, 5))}"
    return f"R{word & 0x7}"


def disassemble(word: int, address: Optional[int] = None) -> str:
    """
    Render `word` as assembly. With `address`, PC-relative operands are shown
    as absolute targets; otherwise as signed offsets.
    """
    op = Opcode(word >> 12)
    dr = extract(word, 9, 3)
    base = extract(word, 6, 3)

    if op in (Opcode.ADD, Opcode.AND):
        return f"{op.name} R{dr}, R{base}, {_imm_or_reg(word)}"
    if op is Opcode.NOT:
        return f"NOT R{dr}, R{base}"
    if op is Opcode.BR:
        nzp = dr
        if not nzp:
            return "NOP"
        flags = "".join(c for c, bit in zip("nzp", (4, 2, 1)) if nzp & bit)
        return f"BR{flags} {_target(word & 0x1FF, 9, address)}"
    if op is Opcode.JMP:
        return "RET" if base == 7 else f"JMP R{base}"
    if op is Opcode.JSR:
        if (word >> 11) & 1:
            return f"JSR {_target(word & 0x7FF, 11, address)}"
        return f"JSRR R{base}"
    if op in (Opcode.LD, Opcode.LDI, Opcode.LEA, Opcode.ST, Opcode.STI):
        return f"{op.name} R{dr}, {_target(word & 0x1FF, 9, address)}"
    if op in (Opcode.LDR, Opcode.STR):
        return f"{op.name} R{dr}, R{base}, #{to_signed(sign_extend(word & 0x3F, 6))}"
    if op is Opcode.TRAP:
        try:
            return TrapVector(word & 0xFF).name
        except ValueError:
            pass
    # RTI, RES and undefined trap vectors
    return f".FILL x{word:04X}"


def format_cond(cond: int) -> str:
    """COND as NZP letters, e.g. "-Z-"."""
    return "".join(c if cond & flag else "-" for c, flag in
                   (("N", CondFlag.NEG), ("Z", CondFlag.ZRO), ("P", CondFlag.POS)))
