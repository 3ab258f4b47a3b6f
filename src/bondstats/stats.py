"""Data structures for paired samples and their comparison statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .schema import SIGNIFICANCE_LEVEL


@dataclass(frozen=True)
class MetricGroups:
    """Two samples of the same metric, one per comparison arm."""

    group_a: tuple[float, ...]
    group_b: tuple[float, ...]
    unit: str = ""


@dataclass(frozen=True)
class TestResult:
    """Immutable outcome of a two-sample test.

    ``degrees_of_freedom`` is positive for a computed test and ``nan`` for the
    neutral result returned on sparse or zero-variance samples; ``mean_a`` /
    ``mean_b`` are ``nan`` when the corresponding sample is empty.
    """

    mean_a: float
    mean_b: float
    t_statistic: float
    degrees_of_freedom: float
    p_value: float
    method: str = "approximate"

    def is_significant(self, alpha: float = SIGNIFICANCE_LEVEL) -> bool:
        """Return ``True`` when the p-value falls below *alpha*."""
        return self.p_value < alpha

    def as_dict(self) -> dict[str, float | str]:
        """Return the result as a plain dictionary."""

        return asdict(self)


@dataclass(frozen=True)
class QuartileSummary:
    """Five-number summary used to draw a box plot."""

    min: float
    q1: float
    median: float
    q3: float
    max: float

    def as_dict(self) -> dict[str, float]:
        """Return the summary as a plain dictionary."""

        return asdict(self)


@dataclass(frozen=True)
class MetricReport:
    """Everything the presentation layer needs to display one metric."""

    metric: str
    unit: str
    group_a_samples: tuple[float, ...]
    group_b_samples: tuple[float, ...]
    mean_a: float
    mean_b: float
    t_statistic: float
    degrees_of_freedom: float
    p_value: float
    quartiles_a: QuartileSummary
    quartiles_b: QuartileSummary
    method: str = "approximate"

    @property
    def significant(self) -> bool:
        return self.p_value < SIGNIFICANCE_LEVEL

    def as_dict(self) -> dict[str, Any]:
        """Return the report as a plain (nested) dictionary."""

        return asdict(self)
