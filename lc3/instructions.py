"""
Per-opcode handlers and the opcode dispatch table.

Every handler has the signature ``handler(cpu, instr)``. By the time it runs
the PC already points past `instr`, so PC-relative offsets are added to the
incremented PC. Handlers that write a destination register go through
``Registers.set_register_and_flag`` so COND always tracks the last write.
"""
from .alu import ALU
from .bits import extract, sign_extend, to_word
from .consts import Opcode
from .errors import IllegalInstruction
from .traps import dispatch_trap


def _dr(instr):
    return extract(instr, 9, 3)


def _base(instr):
    return extract(instr, 6, 3)


def _pc_offset9(cpu, instr):
    return to_word(cpu.reg.pc + sign_extend(instr & 0x1FF, 9))


def _base_offset6(cpu, instr):
    return to_word(cpu.reg[_base(instr)] + sign_extend(instr & 0x3F, 6))


# ─────────────────────────── operate ───────────────────────────
def _operate(mnemonic):
    def handler(cpu, instr):
        a = cpu.reg[_base(instr)]                  # SR1
        if (instr >> 5) & 1:                       # imm5
            b = sign_extend(instr & 0x1F, 5)
        else:                                      # SR2
            b = cpu.reg[instr & 0x7]
        cpu.reg.set_register_and_flag(_dr(instr), ALU.execute(mnemonic, a, b))
    handler.__name__ = f"op_{mnemonic.lower()}"
    return handler


op_add = _operate("ADD")
op_and = _operate("AND")


def op_not(cpu, instr):
    cpu.reg.set_register_and_flag(_dr(instr), ALU.execute("NOT", cpu.reg[_base(instr)]))


# ─────────────────────────── control ───────────────────────────
def op_br(cpu, instr):
    nzp = extract(instr, 9, 3)
    if nzp & cpu.reg.cond:
        cpu.reg.pc = _pc_offset9(cpu, instr)


def op_jmp(cpu, instr):
    """JMP BaseR; RET is JMP R7."""
    cpu.reg.pc = cpu.reg[_base(instr)]


def op_jsr(cpu, instr):
    """JSR (PC + off11) when bit 11 is set, JSRR BaseR otherwise. Links in R7."""
    link = cpu.reg.pc
    if (instr >> 11) & 1:
        target = to_word(link + sign_extend(instr & 0x7FF, 11))
    else:
        target = cpu.reg[_base(instr)]           # read before R7 is overwritten
    cpu.reg[7] = link
    cpu.reg.pc = target


# ─────────────────────────── data movement ───────────────────────────
def op_ld(cpu, instr):
    cpu.reg.set_register_and_flag(_dr(instr), cpu.mem.read(_pc_offset9(cpu, instr)))


def op_ldi(cpu, instr):
    ptr = cpu.mem.read(_pc_offset9(cpu, instr))
    cpu.reg.set_register_and_flag(_dr(instr), cpu.mem.read(ptr))


def op_ldr(cpu, instr):
    cpu.reg.set_register_and_flag(_dr(instr), cpu.mem.read(_base_offset6(cpu, instr)))


def op_lea(cpu, instr):
    cpu.reg.set_register_and_flag(_dr(instr), _pc_offset9(cpu, instr))


def op_st(cpu, instr):
    cpu.mem.write(_pc_offset9(cpu, instr), cpu.reg[_dr(instr)])


def op_sti(cpu, instr):
    ptr = cpu.mem.read(_pc_offset9(cpu, instr))
    cpu.mem.write(ptr, cpu.reg[_dr(instr)])


def op_str(cpu, instr):
    cpu.mem.write(_base_offset6(cpu, instr), cpu.reg[_dr(instr)])


# ─────────────────────────── system ───────────────────────────
def op_trap(cpu, instr):
    dispatch_trap(cpu, instr)


def op_illegal(cpu, instr):
    """RTI and RES have no behavior on this machine."""
    name = Opcode(instr >> 12).name
    raise IllegalInstruction(f"illegal instruction ({name})")


# Indexed by the 4-bit opcode value; see Opcode for the ordering.
OP_TABLE = (
    op_br,       # 0000 BR
    op_add,      # 0001 ADD
    op_ld,       # 0010 LD
    op_st,       # 0011 ST
    op_jsr,      # 0100 JSR
    op_and,      # 0101 AND
    op_ldr,      # 0110 LDR
    op_str,      # 0111 STR
    op_illegal,  # 1000 RTI
    op_not,      # 1001 NOT
    op_ldi,      # 1010 LDI
    op_sti,      # 1011 STI
    op_jmp,      # 1100 JMP
    op_illegal,  # 1101 RES
    op_lea,      # 1110 LEA
    op_trap,     # 1111 TRAP
)


def dispatch(cpu, instr, table=OP_TABLE):
    """Route `instr` to its handler by the top nibble."""
    op = (instr >> 12) & 0xF
    handler = table[op] if op < len(table) else None
    if handler is None:
        raise IllegalInstruction(f"no handler for opcode {op:04b}")
    handler(cpu, instr)
