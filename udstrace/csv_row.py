from __future__ import annotations

from typing import List

from .records import DiagnosticRecord

CSV_COLUMNS = (
    "time",
    "ID",
    "Phy",
    "Dir",
    "TA",
    "PCI",
    "SID",
    "Data1",
    "Data2",
    "Data3",
    "Data4",
    "Data5",
    "Data6",
    "Data7",
    "Data8",
)

CSV_HEADER = ",".join(CSV_COLUMNS) + "\n"


def row_fields(record: DiagnosticRecord) -> List[str]:
    frame = record.frame
    return [
        f"{frame.timestamp:.6f}",
        frame.id_text,
        record.phy,
        record.dir,
        record.ta,
        record.pci,
        record.sid,
        *frame.data_hex,
    ]


def format_row(record: DiagnosticRecord) -> str:
    # Fields are joined verbatim (no quoting) so rows match the header layout exactly.
    return ",".join(row_fields(record)) + "\n"
