import logging

import numpy as np
import pytest
from pytest import approx
from scipy import stats as sps

from bondstats import engine
from bondstats.errors import EmptySampleError


def test_mean_of_repeated_value() -> None:
    assert engine.mean([3.25, 3.25, 3.25]) == 3.25


def test_mean_empty_sample_raises() -> None:
    with pytest.raises(EmptySampleError):
        engine.mean([])


def test_sample_variance_is_unbiased() -> None:
    assert engine.sample_variance([1.0, 2.0, 3.0, 4.0, 5.0], 3.0) == approx(2.5)


def test_sample_variance_short_sample_is_nan() -> None:
    assert np.isnan(engine.sample_variance([4.0], 4.0))
    assert np.isnan(engine.sample_variance([], 0.0))


def test_welch_against_hand_computation() -> None:
    a = [1.0, 2.0, 3.0, 4.0, 5.0]
    b = [2.0, 4.0, 6.0, 8.0, 10.0]
    res = engine.two_sample_test(a, b)

    # var_a / n_a = 0.5, var_b / n_b = 2.0
    t = 3.0 / np.sqrt(2.5)
    df = 2.5**2 / (0.5**2 / 4 + 2.0**2 / 4)
    assert res.mean_a == approx(3.0)
    assert res.mean_b == approx(6.0)
    assert res.t_statistic == approx(t)
    assert res.degrees_of_freedom == approx(df)
    assert res.p_value == approx((1 + t**2 / df) ** (-(df + 1) / 2))
    assert res.method == "approximate"


def test_exact_method_matches_scipy_welch() -> None:
    a = [42.0, 42.0, 43.0, 42.0, 43.0, 42.0, 41.0]
    b = [43.0, 43.0, 42.0, 42.0, 41.0, 41.0, 43.0, 44.0]
    res = engine.two_sample_test(a, b, method="exact")
    ref = sps.ttest_ind(a, b, equal_var=False)

    assert res.t_statistic == approx(abs(ref.statistic))
    assert res.p_value == approx(ref.pvalue)
    assert res.method == "exact"


def test_argument_order_does_not_change_t_or_p() -> None:
    a = [1.0, 2.0, 3.0, 4.0, 5.0]
    b = [2.0, 4.0, 6.0, 8.0, 10.0, 12.0]
    ab = engine.two_sample_test(a, b)
    ba = engine.two_sample_test(b, a)

    assert ab.t_statistic == ba.t_statistic
    assert ab.p_value == ba.p_value
    assert ab.degrees_of_freedom == ba.degrees_of_freedom
    assert (ab.mean_a, ab.mean_b) == (ba.mean_b, ba.mean_a)


@pytest.mark.parametrize("method", ["approximate", "exact"])
def test_sample_against_itself(method: str) -> None:
    a = [4.309, 4.268, 4.368, 4.502, 4.334]
    res = engine.two_sample_test(a, a, method=method)
    assert res.t_statistic == 0
    assert res.p_value == approx(1.0)
    assert not res.is_significant()


def test_sparse_samples_give_neutral_result() -> None:
    res = engine.two_sample_test([1.0], [1.0, 2.0, 3.0])
    assert res.t_statistic == 0
    assert res.p_value == 1
    assert res.mean_a == 1.0
    assert res.mean_b == approx(2.0)
    assert np.isnan(res.degrees_of_freedom)

    empty = engine.two_sample_test([], [])
    assert empty.p_value == 1
    assert np.isnan(empty.mean_a) and np.isnan(empty.mean_b)


def test_constant_samples_give_neutral_result(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="bondstats.engine"):
        res = engine.two_sample_test([5.0, 5.0, 5.0], [7.0, 7.0])
    assert res.t_statistic == 0
    assert res.p_value == 1
    assert "means differ" in caplog.text


def test_unknown_method_raises() -> None:
    with pytest.raises(ValueError):
        engine.two_sample_test([1.0, 2.0], [3.0, 4.0], method="bootstrap")


def test_significance_threshold() -> None:
    far = engine.two_sample_test([1.0, 1.1, 0.9, 1.0], [5.0, 5.2, 4.8, 5.1])
    assert far.p_value < 0.05
    assert far.is_significant()
    assert not far.is_significant(alpha=far.p_value)


def test_registered_methods() -> None:
    assert {"approximate", "exact"} <= set(engine.P_VALUE_METHODS)


def test_quartiles_linear_interpolation() -> None:
    q = engine.quartile_summary([4.0, 2.0, 1.0, 3.0])
    assert q.as_dict() == approx(
        {"min": 1.0, "q1": 1.75, "median": 2.5, "q3": 3.25, "max": 4.0}
    )


def test_quartiles_empty_sample_is_all_zero() -> None:
    q = engine.quartile_summary([])
    assert q.as_dict() == {"min": 0.0, "q1": 0.0, "median": 0.0, "q3": 0.0, "max": 0.0}


def test_quartiles_single_value() -> None:
    q = engine.quartile_summary([7.5])
    assert q.min == q.q1 == q.median == q.q3 == q.max == 7.5


def test_quartiles_are_ordered() -> None:
    rng = np.random.default_rng(0)
    for size in (1, 2, 3, 7, 22, 101):
        q = engine.quartile_summary(rng.normal(45.0, 3.0, size=size))
        assert q.min <= q.q1 <= q.median <= q.q3 <= q.max


def test_underflowing_variances_give_neutral_result() -> None:
    res = engine.two_sample_test([0.0, 1e-160], [0.0, 1e-160])
    assert res.t_statistic == 0
    assert res.p_value == 1
    assert np.isnan(res.degrees_of_freedom)


def test_huge_values_do_not_raise() -> None:
    res = engine.two_sample_test([1e200, -1e200, 3e200], [2e200, -2e200, 5e200])
    assert 0.0 < res.p_value <= 1.0


def test_quartiles_follow_lower_neighbour_formula() -> None:
    rng = np.random.default_rng(7)
    for _ in range(200):
        s = sorted(rng.uniform(0.0, 10.0, size=3).tolist())
        q = engine.quartile_summary(s)
        # pos = 0.5, 1.0, 1.5 for n = 3
        assert q.q1 == s[0] + 0.5 * (s[1] - s[0])
        assert q.median == s[1]
        assert q.q3 == s[1] + 0.5 * (s[2] - s[1])


def test_quartiles_match_numpy_up_to_rounding() -> None:
    rng = np.random.default_rng(3)
    sample = rng.normal(4.4, 0.15, size=22)
    q = engine.quartile_summary(sample)
    np.testing.assert_allclose(
        [q.q1, q.median, q.q3], np.quantile(sample, [0.25, 0.5, 0.75]), rtol=1e-12
    )
