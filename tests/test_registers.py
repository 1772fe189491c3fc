import pytest

from lc3.consts import PC_START, CondFlag
from lc3.registers import Registers, classify


def test_initial_state():
    reg = Registers()
    assert reg.snapshot() == (0,) * 8 + (PC_START, CondFlag.ZRO)


@pytest.mark.parametrize("value, flag", [
    (0, CondFlag.ZRO),
    (1, CondFlag.POS),
    (0x7FFF, CondFlag.POS),
    (0x8000, CondFlag.NEG),
    (0xFFFF, CondFlag.NEG),
])
def test_classify(value, flag):
    assert classify(value) is flag


def test_set_register_and_flag():
    reg = Registers()
    reg.set_register_and_flag(3, 0x8001)
    assert reg[3] == 0x8001
    assert reg.cond_flag() is CondFlag.NEG
    reg.set_register_and_flag(3, 0x10000)   # wraps to zero
    assert reg[3] == 0
    assert reg.cond_flag() is CondFlag.ZRO


def test_bare_store_leaves_cond():
    reg = Registers()
    reg[7] = 0x1234
    assert reg[7] == 0x1234
    assert reg.cond_flag() is CondFlag.ZRO


def test_invalid_register_index():
    reg = Registers()
    with pytest.raises(IndexError):
        reg[8]
    with pytest.raises(IndexError):
        reg[8] = 1
