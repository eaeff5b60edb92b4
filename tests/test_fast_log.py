import pytest

from jpegtune.fast_log import log2_floor, log2_floor_nonzero


def test_zero_gives_minus_one():
    assert log2_floor(0) == -1


def test_one_gives_zero():
    assert log2_floor(1) == 0
    assert log2_floor_nonzero(1) == 0


@pytest.mark.parametrize("k", range(32))
def test_powers_of_two_and_neighbours(k):
    assert log2_floor(1 << k) == k
    assert log2_floor_nonzero((1 << (k + 1)) - 1) == k


def test_nonzero_rejects_zero():
    with pytest.raises(ValueError):
        log2_floor_nonzero(0)


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        log2_floor(value)