from typing import Iterable, Optional, Tuple

from .bits import WORD_MASK
from .console import Keyboard
from .consts import KBSR_READY, MEMORY_SIZE, MR_KBDR, MR_KBSR


class Memory:
    """64K words of memory. Reading KBSR polls the attached keyboard."""

    def __init__(self, keyboard: Optional[Keyboard] = None):
        self.mem = [0]*MEMORY_SIZE
        self.keyboard = keyboard

    def __len__(self):
        return MEMORY_SIZE

    def read(self, addr: int) -> int:
        """Read a 16-bit word, emulating the keyboard registers"""
        addr &= WORD_MASK
        if addr == MR_KBSR:
            if self.keyboard is not None and self.keyboard.key_ready():
                self.mem[MR_KBSR] = KBSR_READY
                self.mem[MR_KBDR] = self.keyboard.read_key() & WORD_MASK
            else:
                self.mem[MR_KBSR] = 0
        return self.mem[addr]

    def write(self, addr: int, value: int):
        """Write a 16-bit word to memory"""
        self.mem[addr & WORD_MASK] = value & WORD_MASK

    def peek(self, addr: int) -> int:
        """Read without touching the keyboard (for string traps and displays)"""
        return self.mem[addr & WORD_MASK]

    def load(self, origin: int, words: Iterable[int]) -> int:
        """Store consecutive words from `origin`, wrapping at the top of memory."""
        count = 0
        for count, word in enumerate(words, 1):
            self.mem[(origin + count - 1) & WORD_MASK] = word & WORD_MASK
        return count

    def dump(self, start: int, count: int) -> Tuple[int, ...]:
        return tuple(self.mem[(start + i) & WORD_MASK] for i in range(count))

    def clear(self):
        self.mem = [0]*MEMORY_SIZE
