"""Tests for cost_scaling module."""
from dominion.cost_scaling import CostScaling


def test_exponential_zero_count_is_base():
    cs = CostScaling.exponential(1.15)
    assert cs.compute(15, 0) == 15


def test_exponential_truncates():
    cs = CostScaling.exponential(1.15)
    # 15 * 1.15 = 17.25
    assert cs.compute(15, 1) == 17
    # 15 * 1.3225 = 19.8375
    assert cs.compute(15, 2) == 19


def test_exponential_doubling():
    cs = CostScaling.exponential(2.0)
    assert cs.compute(100, 1) == 200
    assert cs.compute(100, 2) == 400
    assert cs.compute(100, 3) == 800


def test_exponential_default_rate():
    cs = CostScaling.exponential()
    assert cs.growth_rate == 1.15
    # 1.15 is not exact in binary; truncation follows the float product
    assert cs.compute(100, 1) == int(100 * 1.15)


def test_monotonic_in_count():
    cs = CostScaling.exponential(1.15)
    costs = [cs.compute(15, n) for n in range(60)]
    assert costs == sorted(costs)
