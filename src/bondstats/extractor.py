"""Turn a delimited measurement export into paired numeric samples.

Rows are located purely by position: the first ``schema.preamble_rows``
rows are skipped, and every metric is read from the two column indices
given in the schema.  Problems inside a row never raise; only input that is
not text at all produces a :class:`~bondstats.errors.ParseError`.
"""

from __future__ import annotations

import logging
import math
import re
from os import PathLike

from .errors import ParseError
from .schema import DEFAULT_SCHEMA, RecordSchema
from .stats import MetricGroups

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"[\s\ufeff]*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def _decode(content: str | bytes) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, (bytes, bytearray)):
        try:
            return bytes(content).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ParseError(f"content is not valid UTF-8 text: {exc}") from exc
    raise ParseError(f"expected text content, got {type(content).__name__}")


def parse_value(field: str) -> float | None:
    """Return the leading number of *field* as a finite float.

    Only the numeric prefix of the field is used: ``"42um"`` gives ``42.0``
    and ``"4.3.1"`` gives ``4.3``.  Fields without a numeric prefix, and
    non-finite values, give ``None``.
    """
    match = _NUMBER.match(field)
    if match is None:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def _cell(row: list[str], index: int) -> float | None:
    if index >= len(row):
        return None
    return parse_value(row[index])


def parse_records(
    content: str | bytes, schema: RecordSchema = DEFAULT_SCHEMA
) -> dict[str, MetricGroups]:
    """Extract the metrics described by *schema* from *content*.

    Parameters
    ----------
    content:
        Raw export text, or UTF-8 encoded bytes.
    schema:
        Positional layout of the export.

    Returns
    -------
    dict[str, MetricGroups]
        One entry per schema metric, in schema order.  Samples keep row
        order and may be empty.

    Raises
    ------
    ParseError
        If *content* is neither text nor decodable bytes.
    """
    text = _decode(content)
    collected: dict[str, tuple[list[float], list[float]]] = {
        spec.name: ([], []) for spec in schema.metrics
    }

    lines = text.split("\n")
    skipped = 0
    for lineno, line in enumerate(lines[schema.preamble_rows:], start=schema.preamble_rows + 1):
        row = line.split(schema.delimiter)
        if len(row) < schema.min_fields:
            skipped += 1
            logger.debug("line %d: %d fields, row skipped", lineno, len(row))
            continue

        for spec in schema.metrics:
            group_a, group_b = collected[spec.name]
            value_a = _cell(row, spec.column_a)
            value_b = _cell(row, spec.column_b)
            if value_a is not None:
                group_a.append(value_a)
            if value_b is not None:
                group_b.append(value_b)

    result = {
        spec.name: MetricGroups(
            group_a=tuple(collected[spec.name][0]),
            group_b=tuple(collected[spec.name][1]),
            unit=spec.unit,
        )
        for spec in schema.metrics
    }
    logger.debug(
        "parsed %d lines (%d skipped): %s",
        len(lines),
        skipped,
        {name: (len(g.group_a), len(g.group_b)) for name, g in result.items()},
    )
    return result


def read_records(
    path: str | PathLike[str], schema: RecordSchema = DEFAULT_SCHEMA
) -> dict[str, MetricGroups]:
    """Read the export at *path* and pass it to :func:`parse_records`."""
    with open(path, "rb") as fh:
        return parse_records(fh.read(), schema)
