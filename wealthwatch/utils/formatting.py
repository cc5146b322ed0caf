"""Display formatting helpers"""

import csv
import io
from dataclasses import asdict, fields
from typing import Any, Sequence


def format_currency(amount: float) -> str:
    """Whole-dollar amount without sign, e.g. 12345.6 -> '$12,346'"""
    return f"${abs(amount):,.0f}"


def to_csv(rows: Sequence[Any]) -> str:
    """
    Render dataclass rows as CSV text.

    The header row is the dataclass field names, unquoted. Text cells are
    double-quoted with embedded quotes doubled; numbers are written bare.
    An empty sequence renders as an empty string.
    """
    if not rows:
        return ""

    columns = [f.name for f in fields(rows[0])]
    output = io.StringIO()
    output.write(",".join(columns) + "\n")

    writer = csv.DictWriter(output, fieldnames=columns, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerows(asdict(row) for row in rows)
    return output.getvalue()
