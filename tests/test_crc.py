import pytest

from tinkerbox import crc


def test_table_shape():
    table = crc.build_table()
    assert len(table) == 256
    assert table[0] == 0
    assert all(0 <= value <= 0xFF for value in table)


def test_table_pinned_entry():
    assert crc.build_table(0xDB)[1] == 0xDB


def test_table_is_linear():
    table = crc.build_table()
    for a in (1, 0x37, 0x80, 0xF0):
        for b in (2, 0x0F, 0x55, 0xFF):
            assert table[a ^ b] == table[a] ^ table[b]


def test_bitwise_pinned_and_linear():
    assert crc.crc8_bitwise(1, 0) == 0xD8
    for a, b in [(3, 5), (0x80, 0x7F), (0xAA, 0x55)]:
        assert crc.crc8_bitwise(a ^ b) == crc.crc8_bitwise(a) ^ crc.crc8_bitwise(b)


@pytest.mark.parametrize("value", [0, 1, 0x41, 0xFF])
def test_bitwise_check_is_zero(value):
    remainder = crc.crc8_bitwise(value)
    assert crc.crc8_bitwise(remainder, remainder) == 0


def test_crc8_empty_and_single_byte():
    table = crc.build_table()
    assert crc.crc8(b"") == 0
    assert crc.crc8(b"A") == table[ord("A")]


def test_crc8_matches_stepwise_table():
    table = crc.build_table()
    data = b"hello world"
    remainder = 0
    for byte in data:
        remainder = crc.crc8_table(byte, table, remainder)
    assert crc.crc8(data) == remainder
    assert crc.crc8_table(remainder, table, remainder) == 0


def test_crc8_detects_change():
    assert crc.crc8(b"hello") != crc.crc8(b"hellp")


def test_main_reports_success(capsys):
    assert crc.main(["hello"]) == 0
    assert capsys.readouterr().out.endswith("success\n")


def test_main_bitwise(capsys):
    assert crc.main(["--bitwise", "hello"]) == 0
    assert capsys.readouterr().out.strip() == "success"