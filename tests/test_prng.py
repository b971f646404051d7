import pytest

from gabornoise.prng import UINT_MAX, PseudoRandomNumberGenerator


def test_first_value_from_seed_one_is_multiplier():
    assert PseudoRandomNumberGenerator(1).next() == 3039177861


def test_state_stays_in_32_bits():
    prng = PseudoRandomNumberGenerator(123456789)
    values = [prng.next() for _ in range(1000)]
    assert all(0 <= v <= UINT_MAX for v in values)


def test_seed_is_reduced_to_32_bits():
    a = PseudoRandomNumberGenerator(5)
    b = PseudoRandomNumberGenerator(5 + (1 << 32))
    assert [a.next() for _ in range(5)] == [b.next() for _ in range(5)]


def test_same_seed_same_sequence():
    a = PseudoRandomNumberGenerator(42)
    b = PseudoRandomNumberGenerator(42)
    assert [a.uniform_0_1() for _ in range(20)] == [b.uniform_0_1() for _ in range(20)]


def test_different_seeds_differ():
    a = PseudoRandomNumberGenerator(42)
    b = PseudoRandomNumberGenerator(43)
    assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]


def test_uniform_0_1_range():
    prng = PseudoRandomNumberGenerator(7)
    values = [prng.uniform_0_1() for _ in range(1000)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_uniform_0_1_is_state_over_max():
    prng = PseudoRandomNumberGenerator(9)
    value = prng.uniform_0_1()
    assert value == pytest.approx(prng.state / UINT_MAX)


@pytest.mark.parametrize("low,high", [(-1.0, 1.0), (0.125, 0.225), (0.0, 6.28)])
def test_uniform_range(low, high):
    prng = PseudoRandomNumberGenerator(99)
    values = [prng.uniform(low, high) for _ in range(500)]
    assert all(low <= v <= high for v in values)


def test_uniform_degenerate_interval():
    prng = PseudoRandomNumberGenerator(3)
    assert prng.uniform(0.5, 0.5) == 0.5


def test_poisson_zero_mean_is_zero():
    prng = PseudoRandomNumberGenerator(17)
    assert [prng.poisson(0.0) for _ in range(50)] == [0] * 50


def test_poisson_seed_zero_always_zero():
    prng = PseudoRandomNumberGenerator(0)
    assert prng.poisson(10.0) == 0


def test_poisson_nonnegative_and_deterministic():
    a = PseudoRandomNumberGenerator(1234)
    b = PseudoRandomNumberGenerator(1234)
    counts_a = [a.poisson(3.0) for _ in range(100)]
    counts_b = [b.poisson(3.0) for _ in range(100)]
    assert counts_a == counts_b
    assert all(c >= 0 for c in counts_a)
    assert any(c > 0 for c in counts_a)