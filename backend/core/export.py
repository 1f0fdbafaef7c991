"""CSV export of a projection table (spreadsheet-friendly for pt-BR locales)."""

from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import List, Optional, Sequence

from backend.core.number_format import format_decimal
from backend.core.projection import PeriodSnapshot

BOM = "\ufeff"

CSV_HEADERS = [
    "Month",
    "Interest for the month (R$)",
    "Total contributed (R$)",
    "Cumulative interest (R$)",
    "Gross balance (R$)",
    "Taxable gain (R$)",
    "Tax rate (%)",
    "Tax withheld (R$)",
    "Net balance (R$)",
]


def snapshot_to_row(row: PeriodSnapshot) -> List[str]:
    return [
        str(row.month),
        format_decimal(row.interestThisPeriod),
        format_decimal(row.totalContributed),
        format_decimal(row.cumulativeInterest),
        format_decimal(row.grossBalance),
        format_decimal(row.taxableGain),
        format_decimal(row.taxRate, 1),
        format_decimal(row.taxWithheld),
        format_decimal(row.netBalance),
    ]


def snapshots_to_csv(snapshots: Sequence[PeriodSnapshot]) -> str:
    """Semicolon-delimited, comma decimals, prefixed with a UTF-8 byte-order mark."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(snapshot_to_row(row) for row in snapshots)
    # no trailing newline after the last row
    return BOM + buffer.getvalue().rstrip("\n")


def csv_filename(timestamp: Optional[datetime] = None) -> str:
    moment = timestamp or datetime.now()
    return f"investment-simulation-{int(moment.timestamp() * 1000)}.csv"
