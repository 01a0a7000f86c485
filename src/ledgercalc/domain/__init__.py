"""Domain layer for ledgercalc.

Only the calculation core is re-exported here; the database-backed services
are imported from their own modules.
"""

from ledgercalc.domain.rounding import round_amount
from ledgercalc.domain.line_calculator import recalculate_line, recalculate_lines
from ledgercalc.domain.totals import aggregate_totals, aggregate_adjustment_totals
from ledgercalc.domain.header_sync import (
    HeaderSyncController,
    recalculate_and_set_header_totals,
)

__all__ = [
    "round_amount",
    "recalculate_line",
    "recalculate_lines",
    "aggregate_totals",
    "aggregate_adjustment_totals",
    "HeaderSyncController",
    "recalculate_and_set_header_totals",
]
