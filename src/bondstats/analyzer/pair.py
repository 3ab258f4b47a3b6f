"""Analyzer for a single pair of samples."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .. import engine
from ..stats import MetricReport, QuartileSummary, TestResult


class PairAnalyzer:
    """Compare two samples of one metric.

    The samples are copied into float arrays on construction; every method
    recomputes its result from them, nothing is cached.
    """

    def __init__(
        self,
        group_a: Iterable[float],
        group_b: Iterable[float],
        *,
        metric: str = "",
        unit: str = "",
    ) -> None:
        self.group_a = np.asarray(list(group_a), dtype=float)
        self.group_b = np.asarray(list(group_b), dtype=float)
        self.metric = metric
        self.unit = unit

    def test(self, method: str = "approximate") -> TestResult:
        """Run Welch's t-test on the two samples."""
        return engine.two_sample_test(self.group_a, self.group_b, method=method)

    def quartiles(self) -> tuple[QuartileSummary, QuartileSummary]:
        """Return the five-number summaries of both samples."""
        return (
            engine.quartile_summary(self.group_a),
            engine.quartile_summary(self.group_b),
        )

    def summary(self, method: str = "approximate") -> MetricReport:
        """Return a :class:`MetricReport` bundling test and quartiles."""
        result = self.test(method)
        quartiles_a, quartiles_b = self.quartiles()
        return MetricReport(
            metric=self.metric,
            unit=self.unit,
            group_a_samples=tuple(self.group_a.tolist()),
            group_b_samples=tuple(self.group_b.tolist()),
            mean_a=result.mean_a,
            mean_b=result.mean_b,
            t_statistic=result.t_statistic,
            degrees_of_freedom=result.degrees_of_freedom,
            p_value=result.p_value,
            quartiles_a=quartiles_a,
            quartiles_b=quartiles_b,
            method=result.method,
        )
