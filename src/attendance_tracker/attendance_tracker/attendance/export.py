from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..common.datetime_utils import format_iso_date
from ..core.constants import CSV_DATE_HEADER, CSV_HEADER
from .model import ExportRow


def export_filename(work_date: date) -> str:
    return f"attendance_{format_iso_date(work_date)}.csv"


def render_csv(rows: Iterable[ExportRow], *, include_date: bool = True) -> str:
    """Serialize export rows in buffer order.

    Unset statuses are written as empty fields.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    header = list(CSV_HEADER)
    if include_date:
        header.append(CSV_DATE_HEADER)
    writer.writerow(header)

    for r in rows:
        row = [r.student_id, r.name, r.status]
        if include_date:
            row.append(format_iso_date(r.work_date) if r.work_date else "")
        writer.writerow(row)

    return out.getvalue()
