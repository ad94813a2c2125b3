import pytest

from wheelkit.mathutil import usize_log2


def test_log2_of_one():
    assert usize_log2(1) == 0


@pytest.mark.parametrize("k", range(64))
def test_log2_of_powers_of_two(k):
    assert usize_log2(1 << k) == k


@pytest.mark.parametrize("n", [3, 5, 6, 7, 100, 1000, 12345, 2**40 + 17])
def test_log2_brackets_n(n):
    r = usize_log2(n)
    assert 1 << r <= n < 1 << (r + 1)


@pytest.mark.parametrize("k", range(1, 20))
def test_log2_just_below_power(k):
    assert usize_log2((1 << k) - 1) == k - 1


@pytest.mark.parametrize("n", [0, -1])
def test_log2_rejects_non_positive(n):
    with pytest.raises(ValueError):
        usize_log2(n)