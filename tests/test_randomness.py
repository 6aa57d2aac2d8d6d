import pytest

from passgen_pro.randomness import random_bytes, select


def fixed(*values):
    data = bytes(values)

    def source(n):
        assert n == len(data)
        return data

    return source


def test_select_maps_bytes_modulo_alphabet():
    assert select(4, "abc", fixed(0, 1, 2, 3)) == ["a", "b", "c", "a"]
    assert select(2, "abc", fixed(254, 255)) == ["c", "a"]


def test_select_preserves_draw_order():
    assert select(3, ["x", "y", "z", "w"], fixed(3, 0, 2)) == ["w", "x", "z"]


def test_select_zero_count():
    assert select(0, "abc", fixed()) == []


def test_select_rejects_empty_alphabet():
    with pytest.raises(ValueError):
        select(3, "", fixed(0, 0, 0))


def test_random_bytes_rejects_negative_count():
    with pytest.raises(ValueError):
        random_bytes(-1)


def test_random_bytes_rejects_short_source():
    with pytest.raises(ValueError):
        random_bytes(4, lambda n: b"\x00")


def test_default_source_is_secure_and_sized():
    data = random_bytes(32)
    assert isinstance(data, bytes)
    assert len(data) == 32


def test_select_default_source_stays_in_alphabet():
    picks = select(500, "ab")
    assert set(picks) <= {"a", "b"}
