"""Tests for the core CRC-15 function: purity, bounds and error sensitivity."""

from array import array

from crc15 import crc15, crc15_update, CRC15_INIT, REGISTER_MASK


SAMPLES = [
    b"A",
    b"AAAA",
    b"123456789",
    b"The quick brown fox jumps over the lazy dog",
    bytes(range(256)),
    bytes(range(1, 256, 2)),
]


def test_deterministic():
    for data in SAMPLES:
        assert crc15(data) == crc15(data)


def test_accepts_bytes_like_and_iterables():
    data = b"123456789"
    expected = crc15(data)
    assert crc15(bytearray(data)) == expected
    assert crc15(memoryview(data)) == expected
    assert crc15(list(data)) == expected
    assert crc15(iter(data)) == expected


def test_input_not_mutated():
    data = bytearray(b"AAAA")
    crc15(data)
    assert data == bytearray(b"AAAA")


def test_result_fits_register():
    for data in SAMPLES:
        assert 0 <= crc15(data) <= REGISTER_MASK


def test_start_end_bounds():
    data = b"prefix_123456789_suffix"
    assert crc15(data, 7, 16) == crc15(b"123456789")
    assert crc15(data, 7) == crc15(b"123456789_suffix")
    assert crc15(data, end=6) == crc15(b"prefix")


def test_start_end_bounds_on_list():
    data = list(b"xxAAAAxx")
    assert crc15(data, 2, 6) == 0xE397


def test_empty_range():
    assert crc15(b"AAAA", 2, 2) == CRC15_INIT


def test_single_bit_flip_changes_crc():
    for data in SAMPLES:
        original = crc15(data)
        for i in range(len(data)):
            for bit in range(8):
                corrupted = bytearray(data)
                corrupted[i] ^= 1 << bit
                assert crc15(corrupted) != original, f"flip byte {i} bit {bit} of {data!r}"


def test_appending_zero_byte_changes_crc():
    for data in SAMPLES + [b""]:
        assert crc15(data) != crc15(data + b"\x00")


def test_update_from_init_matches_crc15():
    for data in SAMPLES:
        assert crc15_update(CRC15_INIT, data) == crc15(data)


def test_update_split_matches_single_pass():
    for data in SAMPLES:
        for split in range(len(data) + 1):
            head, tail = data[:split], data[split:]
            assert crc15_update(crc15(head), tail) == crc15(data)


def test_update_with_empty_data_is_identity():
    assert crc15_update(0xE397, b"") == 0xE397


def test_wide_memoryview_is_read_as_bytes():
    words = memoryview(array("H", [0x4141, 0x4141]))
    assert crc15(words) == crc15(b"AAAA") == 0xE397
    assert crc15_update(CRC15_INIT, words) == 0xE397


def test_wide_memoryview_bounds_count_bytes():
    words = memoryview(array("H", [0x0000, 0x4141, 0x4141, 0x0000]))
    assert crc15(words, 2, 6) == crc15(b"AAAA")


def test_out_of_range_ints_lose_high_bits():
    assert crc15([0x141]) == crc15(b"A")
