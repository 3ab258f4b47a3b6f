"""Statistics engine: descriptive statistics, Welch's t-test and quartiles.

All functions are pure.  Samples may be any iterable of floats; they are
converted to ``float`` numpy arrays on entry and never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import numpy as np
from scipy import stats as sps

from .errors import EmptySampleError
from .stats import QuartileSummary, TestResult

logger = logging.getLogger(__name__)

P_VALUE_METHODS: dict[str, Callable[[float, float], float]] = {}


def register_p_value(
    name: str,
) -> Callable[[Callable[[float, float], float]], Callable[[float, float], float]]:
    """Register *name* as a p-value method taking ``(t, df)``."""

    def decorator(fn: Callable[[float, float], float]) -> Callable[[float, float], float]:
        P_VALUE_METHODS[name] = fn
        return fn

    return decorator


@register_p_value("approximate")
def approximate_p_value(t: float, df: float) -> float:
    """Closed-form tail estimate ``(1 + t**2/df) ** (-(df + 1)/2)``.

    This is not the Student-t CDF.  It is kept as the default so results
    match the numbers published by the earlier dashboard; it loses accuracy
    for small ``df`` and large ``t``.
    """
    return float((1.0 + t * t / df) ** (-(df + 1.0) / 2.0))


@register_p_value("exact")
def exact_p_value(t: float, df: float) -> float:
    """Two-tailed p-value from the Student-t survival function."""
    return float(2.0 * sps.t.sf(t, df))


def _as_array(sample: Iterable[float]) -> np.ndarray:
    return np.asarray(list(sample), dtype=float)


def mean(sample: Iterable[float]) -> float:
    """Arithmetic mean of *sample*.

    Raises
    ------
    EmptySampleError
        If *sample* holds no values.
    """
    arr = _as_array(sample)
    if arr.size == 0:
        raise EmptySampleError("mean of an empty sample is undefined")
    return float(np.mean(arr))


def sample_variance(sample: Iterable[float], mean: float) -> float:
    """Unbiased variance of *sample* around the precomputed *mean*.

    Returns ``nan`` when the sample holds fewer than two values.
    """
    arr = _as_array(sample)
    n = arr.size
    if n < 2:
        return float("nan")
    return float(np.sum((arr - mean) ** 2) / (n - 1))


def _degenerate(a: np.ndarray, b: np.ndarray, method: str) -> TestResult:
    return TestResult(
        mean_a=float(np.mean(a)) if a.size else float("nan"),
        mean_b=float(np.mean(b)) if b.size else float("nan"),
        t_statistic=0.0,
        degrees_of_freedom=float("nan"),
        p_value=1.0,
        method=method,
    )


def two_sample_test(
    group_a: Iterable[float],
    group_b: Iterable[float],
    *,
    method: str = "approximate",
) -> TestResult:
    """Welch's unequal-variance t-test between two samples.

    Parameters
    ----------
    group_a, group_b:
        The two samples.  Order does not affect ``t_statistic`` or
        ``p_value``.
    method:
        Name of a registered p-value routine.  ``"approximate"`` (default)
        uses the closed-form tail estimate, ``"exact"`` the Student-t
        distribution.

    Returns
    -------
    TestResult
        When either sample has fewer than two values, or the variances are
        too small to form the Welch-Satterthwaite degrees of freedom (both
        samples constant included), a neutral result with
        ``t_statistic == 0``, ``p_value == 1`` and ``degrees_of_freedom``
        ``nan`` is returned instead of raising.
    """
    if method not in P_VALUE_METHODS:
        raise ValueError(
            f"method must be one of {sorted(P_VALUE_METHODS)}, got {method!r}."
        )

    a = _as_array(group_a)
    b = _as_array(group_b)
    n_a, n_b = a.size, b.size
    if n_a < 2 or n_b < 2:
        return _degenerate(a, b, method)

    m_a = mean(a)
    m_b = mean(b)
    with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
        ratio_a = np.float64(sample_variance(a, m_a)) / n_a
        ratio_b = np.float64(sample_variance(b, m_b)) / n_b
        se = np.sqrt(ratio_a + ratio_b)
        denom = ratio_a**2 / (n_a - 1) + ratio_b**2 / (n_b - 1)
        df = (ratio_a + ratio_b) ** 2 / denom

    if se == 0 or denom == 0 or not np.isfinite(df):
        # squared ratios may underflow to zero while se stays positive
        logger.warning(
            "degenerate variance (n_a=%d, n_b=%d, mean_a=%g, mean_b=%g, means %s); "
            "returning neutral result",
            n_a,
            n_b,
            m_a,
            m_b,
            "equal" if m_a == m_b else "differ",
        )
        return _degenerate(a, b, method)

    t = float(abs(m_a - m_b) / se)
    df = float(df)
    p = P_VALUE_METHODS[method](t, df)

    return TestResult(
        mean_a=m_a,
        mean_b=m_b,
        t_statistic=t,
        degrees_of_freedom=df,
        p_value=p,
        method=method,
    )


def _interpolate(sorted_arr: np.ndarray, q: np.ndarray) -> np.ndarray:
    pos = (sorted_arr.size - 1) * q
    base = np.floor(pos).astype(np.intp)
    rest = pos - base
    lo = sorted_arr[base]
    hi = sorted_arr[np.minimum(base + 1, sorted_arr.size - 1)]
    # rounding of lo + rest * (hi - lo) may step past hi
    return np.clip(lo + rest * (hi - lo), lo, hi)


def quartile_summary(sample: Iterable[float]) -> QuartileSummary:
    """Minimum, quartiles and maximum of *sample*.

    Quartiles use linear interpolation between order statistics at the
    0-indexed fractional rank ``pos = (n - 1) * q``:
    ``sorted[floor(pos)] + frac(pos) * (sorted[floor(pos) + 1] - sorted[floor(pos)])``.
    An empty sample yields an all-zero summary.
    """
    arr = np.sort(_as_array(sample), kind="stable")
    if arr.size == 0:
        return QuartileSummary(min=0.0, q1=0.0, median=0.0, q3=0.0, max=0.0)

    q1, median, q3 = _interpolate(arr, np.array([0.25, 0.5, 0.75]))
    return QuartileSummary(
        min=float(arr[0]),
        q1=float(q1),
        median=float(median),
        q3=float(q3),
        max=float(arr[-1]),
    )
