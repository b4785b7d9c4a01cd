# screens/education/export.py
from __future__ import annotations

from typing import List

import pandas as pd

from schemas.education_schema import DETAIL_FIELDS, EducationRecord

EXPORT_COLUMNS = ["id", *[name for name, _ in DETAIL_FIELDS], "verified", "last_verified", "remark"]


def records_frame(records: List[EducationRecord]) -> pd.DataFrame:
    """Flat table of current values, one row per record."""
    rows = []
    for rec in records:
        row = {"id": rec.id}
        row.update({name: rec.current(name) for name, _ in DETAIL_FIELDS})
        row["verified"] = rec.is_verified
        row["last_verified"] = rec.last_verified.isoformat() if rec.last_verified else ""
        row["remark"] = rec.remark or ""
        rows.append(row)
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def records_csv(records: List[EducationRecord]) -> bytes:
    return records_frame(records).to_csv(index=False).encode("utf-8")
