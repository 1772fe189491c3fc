from lc3.bits import extract, sign_extend, to_signed, to_word


def test_sign_extend_negative_imm5():
    for x in range(0x10, 0x20):
        assert sign_extend(x, 5) == x | 0xFFE0


def test_sign_extend_positive_imm5():
    for x in range(0x10):
        assert sign_extend(x, 5) == x


def test_sign_extend_other_widths():
    assert sign_extend(0x1FF, 9) == 0xFFFF
    assert sign_extend(0x100, 9) == 0xFF00
    assert sign_extend(0x0FF, 9) == 0x00FF
    assert sign_extend(0x400, 11) == 0xFC00
    assert sign_extend(0x20, 6) == 0xFFE0


def test_sign_extend_ignores_bits_above_width():
    assert sign_extend(0xFFE1, 5) == 0x0001


def test_extract():
    word = 0b0001_010_011_1_00101
    assert extract(word, 12, 4) == 0b0001
    assert extract(word, 9, 3) == 0b010
    assert extract(word, 6, 3) == 0b011
    assert extract(word, 5, 1) == 1
    assert extract(word, 0, 5) == 0b00101


def test_word_helpers():
    assert to_word(0x12345) == 0x2345
    assert to_word(-1) == 0xFFFF
    assert to_signed(0xFFFF) == -1
    assert to_signed(0x7FFF) == 0x7FFF
    assert to_signed(0x8000) == -0x8000
