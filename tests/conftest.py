import pytest

from lc3.console import ScriptedConsole
from lc3.cpu_core import LC3

from lc3asm import assemble


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def make_vm(console):
    """Build a machine with `source` assembled at `origin` (PC starts there)."""
    def factory(source="", origin=0x3000, **kwargs):
        vm = LC3(console=kwargs.pop("console", console), **kwargs)
        words = assemble(source) if isinstance(source, str) else list(source)
        vm.mem.load(origin, words)
        vm.reg.pc = origin
        return vm
    return factory
