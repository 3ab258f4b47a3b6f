"""Demo dataset: 22 bonds measured with an ICONN PLUS and a RAPID tool."""

from __future__ import annotations

from .extractor import parse_records
from .schema import DEFAULT_SCHEMA, RecordSchema
from .stats import MetricGroups

DEMO_CSV = """



Model,ICONN PLUS,RAPID,ICONN PLUS,RAPID,ICONN PLUS,RAPID,ICONN PLUS,RAPID,,ICONN PLUS,RAPID
     RAPID,42,43,9,8,46,44,41,41,,4.309,4.433
     ,42,43,10,9,47,46,40,40,,4.268,4.584
     ,43,42,10,10,45,48,39,39,,4.368,4.256
     ,42,42,10,9,48,49,45,44,,4.502,4.488
     ,43,41,9,9,47,50,45,45,,4.334,4.574
     ,42,41,9,10,47,46,45,44,,4.157,4.527
     ,41,43,9,9,52,47,43,43,,4.368,4.342
     ,42,41,10,9,48,48,46,44,,4.383,4.563
     ,42,42,9,8,45,45,45,44,,4.465,4.27
     ,43,43,9,8,46,45,45,42,,4.418,4.436
     ,43,41,9,10,52,51,43,42,,4.56,4.549
     ,42,42,9,9,53,50,45,42,,4.376,4.382
     ,42,42,10,9,47,49,42,43,,4.564,4.304
     ,42,42,9,10,48,48,45,44,,4.529,4.178
     ,41,41,9,8,46,51,45,44,,4.25,4.293
     ,42,41,9,8,47,50,43,42,,4.306,4.276
     ,43,43,10,9,51,47,43,43,,4.493,4.62
     ,42,43,9,10,52,46,46,42,,4.163,4.61
     ,42,43,9,9,53,45,44,42,,4.346,4.35
     ,42,41,9,8,52,46,44,44,,4.151,4.576
     ,42,43,9,10,50,47,44,45,,4.537,4.158
     ,42,43,9,10,48,47,44,45,,4.598,4.406"""

DEMO_ROWS = 22


def load_demo(schema: RecordSchema = DEFAULT_SCHEMA) -> dict[str, MetricGroups]:
    """Parse :data:`DEMO_CSV` with *schema*."""
    return parse_records(DEMO_CSV, schema)
