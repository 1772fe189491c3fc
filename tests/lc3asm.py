"""
Minimal LC-3 assembler for building test programs (one word per line).

    ADD  DR, SR1, SR2 | ADD DR, SR1, #imm5   (AND likewise)
    NOT  DR, SR
    BR[n][z][p] #off9
    JMP  BaseR | RET | JSR #off11 | JSRR BaseR
    LD / LDI / ST / STI / LEA  R, #off9
    LDR / STR  R, BaseR, #off6
    TRAP xNN | GETC | OUT | PUTS | IN | PUTSP | HALT
    RTI | .FILL #n / xNNNN

No labels: offsets are numbers (decimal or 0x hex, optionally negative).
"""
import re
import struct

TRAP_ALIASES = {"GETC": 0x20, "OUT": 0x21, "PUTS": 0x22,
                "IN": 0x23, "PUTSP": 0x24, "HALT": 0x25}


def num(tok, bits, signed=True):
    """token -> field value, range-checked for a `bits`-wide field"""
    neg = tok.startswith('-')
    body = tok[1:] if neg else tok
    v = int(body, 16) if body.lower().startswith('0x') else int(body, 10)
    v = -v if neg else v
    lo = -(1 << (bits-1)) if signed else 0
    hi = (1 << (bits-1)) - 1 if signed else (1 << bits) - 1
    if not lo <= v <= hi:
        raise ValueError(f"immediate {tok} out of range for {bits}-bit field")
    return v & ((1 << bits) - 1)


def assemble_line(line: str) -> int:
    line = re.sub(r';.*$', '', line).strip()
    if not line:
        raise ValueError("empty")

    m = re.match(r'(ADD|AND)\s+R(\d),\s*R(\d),\s*(?:R(\d)|#(-?\w+))$', line, re.I)
    if m:
        op, dr, sr1, sr2, imm = m.groups()
        opcode = 0x1 if op.upper() == 'ADD' else 0x5
        instr = (opcode << 12) | (int(dr) << 9) | (int(sr1) << 6)
        if sr2 is not None:
            return instr | int(sr2)
        return instr | (1 << 5) | num(imm, 5)

    m = re.match(r'NOT\s+R(\d),\s*R(\d)$', line, re.I)
    if m:
        dr, sr = map(int, m.groups())
        return (0x9 << 12) | (dr << 9) | (sr << 6) | 0x3F

    m = re.match(r'BR([nzp]{0,3})\s+#(-?\w+)$', line, re.I)
    if m:
        cond, off = m.groups()
        cond = cond.lower()
        nzp = (0b100 if 'n' in cond else 0) | (0b010 if 'z' in cond else 0) \
            | (0b001 if 'p' in cond else 0)
        if not cond:
            nzp = 0b111
        return (nzp << 9) | num(off, 9)

    if re.fullmatch(r'RET', line, re.I):
        return (0xC << 12) | (7 << 6)
    if re.fullmatch(r'RTI', line, re.I):
        return 0x8 << 12
    m = re.match(r'JMP\s+R(\d)$', line, re.I)
    if m:
        return (0xC << 12) | (int(m.group(1)) << 6)
    m = re.match(r'JSRR\s+R(\d)$', line, re.I)
    if m:
        return (0x4 << 12) | (int(m.group(1)) << 6)
    m = re.match(r'JSR\s+#(-?\w+)$', line, re.I)
    if m:
        return (0x4 << 12) | (1 << 11) | num(m.group(1), 11)

    for mnemonic, opc in [('LDI', 0xA), ('LEA', 0xE), ('STI', 0xB),
                          ('LD', 0x2), ('ST', 0x3)]:
        m = re.match(fr'{mnemonic}\s+R(\d),\s*#(-?\w+)$', line, re.I)
        if m:
            reg, off = m.groups()
            return (opc << 12) | (int(reg) << 9) | num(off, 9)

    for mnemonic, opc in [('LDR', 0x6), ('STR', 0x7)]:
        m = re.match(fr'{mnemonic}\s+R(\d),\s*R(\d),\s*#(-?\w+)$', line, re.I)
        if m:
            reg, base, off = m.groups()
            return (opc << 12) | (int(reg) << 9) | (int(base) << 6) | num(off, 6)

    m = re.match(r'TRAP\s+x([0-9A-F]{1,2})$', line, re.I)
    if m:
        return (0xF << 12) | int(m.group(1), 16)
    if line.upper() in TRAP_ALIASES:
        return (0xF << 12) | TRAP_ALIASES[line.upper()]

    m = re.match(r'\.FILL\s+(?:x([0-9A-F]{1,4})|#(-?\w+))$', line, re.I)
    if m:
        hexval, dec = m.groups()
        if hexval:
            return int(hexval, 16)
        return num(dec, 16, signed=dec.startswith('-'))

    raise ValueError(f"syntax error or unsupported opcode: {line!r}")


def assemble(source: str):
    """Assemble a multi-line program into a list of words."""
    words = []
    for lineno, line in enumerate(source.splitlines(), 1):
        if not re.sub(r';.*$', '', line).strip():
            continue
        try:
            words.append(assemble_line(line))
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e
    return words


def build_image(origin: int, words) -> bytes:
    """Big-endian object image: origin word followed by the program."""
    return struct.pack(f">{len(words) + 1}H", origin, *words)
