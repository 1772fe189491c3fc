"""
Stepping session that sits outside the machine.

The debugger only uses the machine's public step/inspect interface. It keeps
its own log of the instruction at PC before every step, so the window can show
what ran and what runs next.
"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import List, Optional

from lc3.cpu_core import LC3
from lc3.disasm import disassemble
from lc3.loader import ImageSource, read_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    tick: int
    address: int
    word: int
    text: str


class Debugger:
    def __init__(self, vm: LC3, image: Optional[ImageSource] = None):
        self.vm = vm
        self.image = read_image(image) if image is not None else None
        self.ticks = 0
        self.history = deque(maxlen=vm.config.history_limit)
        if self.image is not None:
            self.vm.load_image(self.image)
        self._snapshot()

    def _snapshot(self):
        op = self.vm.peek_next_operation()
        text = disassemble(op.word, op.address)
        self.history.append(HistoryEntry(self.ticks, op.address, op.word, text))

    @property
    def current(self) -> HistoryEntry:
        """Entry for the instruction about to execute (or the last one run)."""
        return self.history[-1]

    def entries(self) -> List[HistoryEntry]:
        return list(self.history)

    def tick(self):
        """Execute one instruction. Errors from the machine propagate."""
        self.vm.step()
        self.ticks += 1
        if self.vm.running:
            self._snapshot()

    def reset(self):
        """Reset the machine, reload the image and start a new history."""
        self.vm.reset()
        if self.image is not None:
            self.vm.load_image(self.image)
        self.ticks = 0
        self.history.clear()
        self._snapshot()
        logger.info("debugger reset")
