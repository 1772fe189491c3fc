import pytest

from lc3.consts import CondFlag
from lc3.disasm import disassemble, format_cond

from lc3asm import assemble_line


@pytest.mark.parametrize("line, expected", [
    ("ADD R0, R0, #1", "ADD R0, R0, #1"),
    ("ADD R0, R1, R2", "ADD R0, R1, R2"),
    ("AND R3, R1, #-16", "AND R3, R1, #-16"),
    ("NOT R0, R1", "NOT R0, R1"),
    ("BRnz #5", "BRnz #5"),
    ("BR #-1", "BRnzp #-1"),
    ("RET", "RET"),
    ("JMP R3", "JMP R3"),
    ("JSRR R2", "JSRR R2"),
    ("JSR #-4", "JSR #-4"),
    ("LD R2, #2", "LD R2, #2"),
    ("LDI R1, #-7", "LDI R1, #-7"),
    ("LEA R0, #0xFF", "LEA R0, #255"),
    ("ST R3, #4", "ST R3, #4"),
    ("STI R3, #1", "STI R3, #1"),
    ("LDR R4, R5, #-2", "LDR R4, R5, #-2"),
    ("STR R3, R4, #31", "STR R3, R4, #31"),
    ("HALT", "HALT"),
    ("TRAP x23", "IN"),
    ("TRAP x26", ".FILL xF026"),
    ("RTI", ".FILL x8000"),
])
def test_disassemble(line, expected):
    assert disassemble(assemble_line(line)) == expected


@pytest.mark.parametrize("line, expected", [
    ("BRnz #5", "BRnz x3006"),
    ("BRp #-1", "BRp x3000"),
    ("JSR #-1", "JSR x3000"),
    ("LD R2, #2", "LD R2, x3003"),
    ("LEA R0, #-2", "LEA R0, x2FFF"),
])
def test_disassemble_absolute_targets(line, expected):
    assert disassemble(assemble_line(line), 0x3000) == expected


def test_target_wraps():
    assert disassemble(assemble_line("BRz #1"), 0xFFFF) == "BRz x0001"


def test_empty_branch_mask_is_nop():
    assert disassemble(0x0005) == "NOP"


def test_reserved_opcode():
    assert disassemble(0xD123) == ".FILL xD123"


def test_format_cond():
    assert format_cond(CondFlag.ZRO) == "-Z-"
    assert format_cond(CondFlag.NEG) == "N--"
    assert format_cond(CondFlag.POS) == "--P"
    assert format_cond(0) == "---"
