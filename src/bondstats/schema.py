"""Positional layout of the wire-bond measurement export.

The export carries no header that could be used to discover columns, so the
location of every metric is fixed by position.  :data:`DEFAULT_SCHEMA`
describes the layout used by the demo dataset and the production exports;
a different :class:`RecordSchema` can be passed to the extractor when the
export format changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import SchemaError

SIGNIFICANCE_LEVEL = 0.05


@dataclass(frozen=True)
class MetricSpec:
    """Name, unit and the two column indices of a single metric."""

    name: str
    unit: str
    column_a: int
    column_b: int


@dataclass(frozen=True)
class RecordSchema:
    """Row layout of a delimited export.

    Parameters
    ----------
    metrics:
        Metrics to extract, in output order.
    preamble_rows:
        Number of leading rows skipped unconditionally.
    min_fields:
        Rows with fewer fields than this are dropped.
    delimiter:
        Field separator.
    group_labels:
        Display names of the two comparison arms (column A, column B).
    """

    metrics: tuple[MetricSpec, ...]
    preamble_rows: int = 5
    min_fields: int = 10
    delimiter: str = ","
    group_labels: tuple[str, str] = ("ICONN PLUS", "RAPID")

    def __post_init__(self) -> None:
        names = [m.name for m in self.metrics]
        if len(set(names)) != len(names):
            raise SchemaError(f"duplicate metric names in schema: {names}")
        for spec in self.metrics:
            if spec.column_a < 0 or spec.column_b < 0:
                raise SchemaError(f"negative column index for metric {spec.name!r}")
        if self.preamble_rows < 0:
            raise SchemaError("preamble_rows must be non-negative.")
        if self.min_fields < 1:
            raise SchemaError("min_fields must be positive.")
        if not self.delimiter:
            raise SchemaError("delimiter must be a non-empty string.")
        if len(self.group_labels) != 2 or self.group_labels[0] == self.group_labels[1]:
            raise SchemaError("group_labels must hold two distinct labels.")

    @property
    def metric_names(self) -> list[str]:
        return [m.name for m in self.metrics]

    def unit_of(self, name: str) -> str:
        """Return the unit of metric *name*."""
        for spec in self.metrics:
            if spec.name == name:
                return spec.unit
        raise KeyError(f"unknown metric {name!r}")


DEFAULT_SCHEMA = RecordSchema(
    metrics=(
        MetricSpec("Ball Size", "µm", 1, 2),
        MetricSpec("Ball Thickness", "µm", 3, 4),
        MetricSpec("Loop Height", "µm", 5, 6),
        MetricSpec("Edge Height", "µm", 7, 8),
        MetricSpec("BPT", "g", 10, 11),
    )
)
