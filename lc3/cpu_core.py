import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import MachineConfig
from .console import Console, TerminalConsole
from .consts import Opcode, TrapVector
from .errors import MachineFault, MachineHalted
from .instructions import OP_TABLE, dispatch
from .loader import ImageSource, load_image
from .memory import Memory
from .registers import Registers

logger = logging.getLogger(__name__)


class MachineState(Enum):
    READY = "ready"
    RUNNING = "running"
    HALTED = "halted"
    FAULTED = "faulted"


@dataclass(frozen=True)
class Operation:
    """Decoded (not executed) instruction, for display."""
    address: int
    word: int
    opcode: Opcode
    vector: Optional[int] = None

    def __str__(self):
        if self.opcode is not Opcode.TRAP:
            return self.opcode.name
        try:
            return f"TRAP {TrapVector(self.vector).name}"
        except ValueError:
            return f"TRAP x{self.vector:02X}"


class MemoryView:
    """Read-only window onto machine memory; never triggers device reads."""

    def __init__(self, memory: Memory):
        self._memory = memory

    def __len__(self):
        return len(self._memory)

    def __getitem__(self, addr: int) -> int:
        return self._memory.peek(addr)

    def dump(self, start: int, count: int) -> Tuple[int, ...]:
        return self._memory.dump(start, count)


class LC3:
    """
    LC-3 virtual machine.
    ─────────────────────────────────────────────────────
    • fetch()  : read the word at PC into IR, PC += 1
    • execute(): dispatch IR through the opcode table
    • step()   : one full cycle (fetch → decode/exec)
    • run()    : step until HALT or a fault
    • reset()  : back to the freshly constructed state
    """

    def __init__(self, console: Optional[Console] = None,
                 config: Optional[MachineConfig] = None):
        self.config = config or MachineConfig()
        self.console = console if console is not None else TerminalConsole()
        self.reg = Registers(pc=self.config.pc_start)   # R0..R7, PC, COND
        self.mem = Memory(self.console)                 # 64K words + KBSR hook
        self.ir = 0
        self.state = MachineState.READY
        self.fault: Optional[MachineFault] = None
        self.steps = 0

    @property
    def running(self) -> bool:
        return self.state in (MachineState.READY, MachineState.RUNNING)

    def load_image(self, source: ImageSource) -> Tuple[int, int]:
        origin, count = load_image(self.mem, source)
        logger.info("image loaded: %d words at x%04X", count, origin)
        return origin, count

    # ───────────────────────────── fetch ─────────────────────────────
    def fetch(self):
        """Read the 16-bit instruction at PC into IR, then PC += 1"""
        self.ir = self.mem.read(self.reg.pc)
        self.reg.pc = (self.reg.pc + 1) & 0xFFFF  # 16-bit wrap-around

    # ───────────────────────── decode / execute ──────────────────────
    def execute(self):
        dispatch(self, self.ir, OP_TABLE)

    # ───────────────────────────── runner ─────────────────────────────
    def step(self):
        """One instruction cycle (fetch-decode-exec).

        Raises MachineHalted if the machine already halted or faulted, and
        re-raises any MachineFault after moving to FAULTED.
        """
        if not self.running:
            raise MachineHalted(f"machine is {self.state.value}")
        self.state = MachineState.RUNNING
        address = self.reg.pc
        self.fetch()
        try:
            self.execute()
        except MachineFault as e:
            if e.address is None:
                e.address, e.word = address, self.ir
            self.fault = e
            self.state = MachineState.FAULTED
            logger.error("machine fault: %s", e)
            raise
        self.steps += 1

    def run(self, max_steps: Optional[int] = None) -> int:
        """Step until the machine stops running. Returns instructions executed."""
        start = self.steps
        logger.debug("run from PC=x%04X", self.reg.pc)
        while self.running:
            if max_steps is not None and self.steps - start >= max_steps:
                break
            self.step()
        return self.steps - start

    def halt(self):
        self.state = MachineState.HALTED
        logger.info("halted after %d instructions", self.steps + 1)

    def reset(self):
        """Registers/memory back to the initial state"""
        self.reg = Registers(pc=self.config.pc_start)
        self.mem.clear()
        self.ir = 0
        self.state = MachineState.READY
        self.fault = None
        self.steps = 0

    # ───────────────────────────── inspection ─────────────────────────────
    def peek_next_operation(self) -> Operation:
        pc = self.reg.pc
        word = self.mem.peek(pc)
        opcode = Opcode(word >> 12)
        vector = word & 0xFF if opcode is Opcode.TRAP else None
        return Operation(pc, word, opcode, vector)

    @property
    def pc(self) -> int:
        return self.reg.pc

    def registers(self) -> Tuple[int, ...]:
        return self.reg.snapshot()

    def memory_view(self) -> MemoryView:
        return MemoryView(self.mem)
