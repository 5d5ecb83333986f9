import pytest

from rtccore.binary import copy_into, random_fill, set_random, set_with_const, to_string


def test_to_string_maps_bytes_to_characters():
    assert to_string(b"abc") == "abc"
    assert to_string(bytearray(b"\x00\xff")) == "\x00\xff"


def test_to_string_empty():
    assert to_string(b"") == ""


def test_set_with_const_fills_all_bytes():
    buf = bytearray(5)
    set_with_const(buf, 7)
    assert buf == bytearray(b"\x07" * 5)


def test_set_with_const_on_memoryview_slice():
    buf = bytearray(b"abcdef")
    set_with_const(memoryview(buf)[2:4], 0)
    assert buf == bytearray(b"ab\x00\x00ef")


def test_set_with_const_rejects_out_of_range():
    with pytest.raises(ValueError):
        set_with_const(bytearray(2), 256)


def test_copy_into_copies_prefix():
    buf = bytearray(b"xxxxx")
    copy_into(buf, b"ab")
    assert buf == bytearray(b"abxxx")


def test_copy_into_exact_size():
    buf = bytearray(3)
    copy_into(buf, b"xyz")
    assert buf == bytearray(b"xyz")


def test_copy_into_too_small_raises():
    buf = bytearray(2)
    with pytest.raises(ValueError):
        copy_into(buf, b"abc")
    assert buf == bytearray(2)


def test_random_fill_keeps_length_and_changes_content():
    first = bytearray(32)
    second = bytearray(32)
    random_fill(first)
    random_fill(second)
    assert len(first) == 32
    assert first != second


def test_set_random_on_empty_leaves_it_empty():
    buf = bytearray()
    set_random(buf)
    assert buf == bytearray()


def test_set_random_fills_buffer():
    buf = bytearray(64)
    set_random(buf)
    assert len(buf) == 64
    assert any(buf)