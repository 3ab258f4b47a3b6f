from __future__ import annotations

from collections.abc import Mapping

import pandas as pd

from ..schema import DEFAULT_SCHEMA
from ..stats import MetricGroups, MetricReport
from .pair import PairAnalyzer

_QUARTILE_FIELDS = ("min", "q1", "median", "q3", "max")


class DatasetAnalyzer:
    """Analyzer over every metric extracted from one export.

    Parameters
    ----------
    groups : Mapping[str, MetricGroups]
        Output of :func:`bondstats.extractor.parse_records`.  Iteration order
        of the mapping is the row order of every table produced here.
    group_labels : tuple[str, str]
        Display names of the two comparison arms, used by :meth:`to_long`.
    """

    def __init__(
        self,
        groups: Mapping[str, MetricGroups],
        *,
        group_labels: tuple[str, str] = DEFAULT_SCHEMA.group_labels,
    ) -> None:
        self.groups = groups
        self.group_labels = group_labels

    def pair(self, metric: str) -> PairAnalyzer:
        """Return a :class:`PairAnalyzer` for *metric*."""
        g = self.groups[metric]
        return PairAnalyzer(g.group_a, g.group_b, metric=metric, unit=g.unit)

    def reports(self, method: str = "approximate") -> dict[str, MetricReport]:
        """Compute one :class:`MetricReport` per metric."""
        return {name: self.pair(name).summary(method) for name in self.groups}

    def summary(self, method: str = "approximate") -> pd.DataFrame:
        """Tabulate test results and quartiles, one row per metric.

        Returns
        -------
        pd.DataFrame
            Columns ``metric``, ``unit``, ``n_a``, ``n_b``, the test fields,
            ``significant`` and the quartile fields suffixed ``_a`` / ``_b``.
        """
        rows = []
        for name, rpt in self.reports(method).items():
            row = {
                "metric": name,
                "unit": rpt.unit,
                "n_a": len(rpt.group_a_samples),
                "n_b": len(rpt.group_b_samples),
                "mean_a": rpt.mean_a,
                "mean_b": rpt.mean_b,
                "t_statistic": rpt.t_statistic,
                "degrees_of_freedom": rpt.degrees_of_freedom,
                "p_value": rpt.p_value,
                "significant": rpt.significant,
            }
            for suffix, quartiles in (("a", rpt.quartiles_a), ("b", rpt.quartiles_b)):
                for field, value in quartiles.as_dict().items():
                    row[f"{field}_{suffix}"] = value
            rows.append(row)

        columns = [
            "metric", "unit", "n_a", "n_b", "mean_a", "mean_b", "t_statistic",
            "degrees_of_freedom", "p_value", "significant",
        ]
        columns += [f"{f}_a" for f in _QUARTILE_FIELDS] + [f"{f}_b" for f in _QUARTILE_FIELDS]
        return pd.DataFrame(rows, columns=columns)

    def to_long(self) -> pd.DataFrame:
        """Return a *long* DataFrame with columns [``metric``, ``unit``, ``group``, ``value``]."""
        label_a, label_b = self.group_labels
        frames = []
        for name, g in self.groups.items():
            wide = pd.DataFrame(
                {label_a: pd.Series(g.group_a, dtype=float),
                 label_b: pd.Series(g.group_b, dtype=float)}
            )
            long = wide.melt(value_vars=[label_a, label_b], var_name="group", value_name="value")
            long = long.dropna(subset=["value"])
            long.insert(0, "unit", g.unit)
            long.insert(0, "metric", name)
            frames.append(long)

        if not frames:
            return pd.DataFrame(columns=["metric", "unit", "group", "value"])
        return pd.concat(frames, ignore_index=True)[["metric", "unit", "group", "value"]]
