"""
Keyboard/display devices for the VM.

`Memory` polls the keyboard through `key_ready()`/`read_key()` whenever KBSR
is read; the trap routines use the same object for blocking input and for
output. `TerminalConsole` talks to the real terminal, `ScriptedConsole`
replays canned input and captures output for tests.
"""
import io
import logging
import os
import select
import sys
from collections import deque
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)

CR = 0x0D
LF = 0x0A


class Keyboard(Protocol):
    def key_ready(self) -> bool: ...

    def read_key(self) -> int: ...


class Console(Keyboard, Protocol):
    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


class TerminalConsole:
    """
    stdin/stdout console.

    Use as a context manager to put a TTY stdin into cbreak mode (no line
    buffering, no echo) for the duration of a run:

        with TerminalConsole() as console:
            machine = LC3(console=console)
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._saved_attrs = None

    def __enter__(self):
        try:
            fd = self.stdin.fileno()
        except (AttributeError, io.UnsupportedOperation):
            return self
        if os.isatty(fd):
            import termios
            import tty
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            logger.debug("terminal switched to cbreak mode")
        return self

    def __exit__(self, *exc):
        if self._saved_attrs is not None:
            import termios
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN,
                              self._saved_attrs)
            self._saved_attrs = None
            logger.debug("terminal mode restored")
        return False

    def key_ready(self) -> bool:
        r, _, _ = select.select([self.stdin], [], [], 0)
        return bool(r)

    def read_key(self) -> int:
        """Block until one byte arrives. EOF reads as 0."""
        self.stdout.flush()
        ch = os.read(self.stdin.fileno(), 1)
        if not ch:
            logger.debug("stdin reached EOF")
            return 0
        c = ch[0]
        return LF if c == CR else c

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()


class ScriptedConsole:
    """
    In-memory console.

    `ready=None` reports a key ready exactly when scripted input remains;
    `ready=True`/`False` forces the KBSR answer (always/never ready).
    Reading past the end of the script raises EOFError rather than blocking.
    """

    def __init__(self, script: Union[str, bytes] = b"",
                 ready: Optional[bool] = None):
        if isinstance(script, str):
            script = script.encode("latin-1")
        self.pending = deque(script)
        self.ready = ready
        self.output = io.StringIO()

    def feed(self, script: Union[str, bytes]) -> None:
        if isinstance(script, str):
            script = script.encode("latin-1")
        self.pending.extend(script)

    def key_ready(self) -> bool:
        if self.ready is not None:
            return self.ready
        return bool(self.pending)

    def read_key(self) -> int:
        if not self.pending:
            if self.ready:
                return 0
            raise EOFError("scripted console has no more input")
        return self.pending.popleft()

    def write(self, text: str) -> None:
        self.output.write(text)

    def flush(self) -> None:
        pass

    @property
    def text(self) -> str:
        return self.output.getvalue()
