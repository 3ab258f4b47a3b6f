"""High level entry points for the wire-bond comparison package.

:func:`analyze` takes the raw text of a measurement export, extracts the
paired samples of every configured metric and returns one
:class:`MetricReport` per metric.  The lower level pieces are available as
:func:`parse_records` (extraction), the functions of :mod:`bondstats.engine`
(statistics) and the analyzers in :mod:`bondstats.analyzer`.
"""

from __future__ import annotations

from .analyzer.dataset import DatasetAnalyzer
from .analyzer.pair import PairAnalyzer
from .demo import load_demo
from .engine import mean, quartile_summary, sample_variance, two_sample_test
from .errors import BondStatsError, EmptySampleError, ParseError, SchemaError
from .extractor import parse_records, read_records
from .report import main
from .schema import DEFAULT_SCHEMA, SIGNIFICANCE_LEVEL, MetricSpec, RecordSchema
from .stats import MetricGroups, MetricReport, QuartileSummary, TestResult

__all__ = [
    "BondStatsError",
    "DEFAULT_SCHEMA",
    "DatasetAnalyzer",
    "EmptySampleError",
    "MetricGroups",
    "MetricReport",
    "MetricSpec",
    "PairAnalyzer",
    "ParseError",
    "QuartileSummary",
    "RecordSchema",
    "SIGNIFICANCE_LEVEL",
    "SchemaError",
    "TestResult",
    "analyze",
    "load_demo",
    "main",
    "mean",
    "parse_records",
    "quartile_summary",
    "read_records",
    "sample_variance",
    "two_sample_test",
]


def analyze(
    content: str | bytes,
    *,
    schema: RecordSchema = DEFAULT_SCHEMA,
    method: str = "approximate",
) -> dict[str, MetricReport]:
    """Extract and compare every metric of an export.

    Parameters
    ----------
    content:
        Raw export text (or UTF-8 bytes).
    schema:
        Positional layout of the export.
    method:
        P-value routine, ``"approximate"`` or ``"exact"``.

    Returns
    -------
    dict[str, MetricReport]
        Reports keyed by metric name, in schema order.
    """

    groups = parse_records(content, schema)
    return DatasetAnalyzer(groups, group_labels=schema.group_labels).reports(method)
