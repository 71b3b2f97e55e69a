from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .frame import classify_frame, extract_data_bytes, normalize_identifier, tokenize_line
from .records import DiagnosticRecord, ParsedFrame


def decode_line(line: str) -> Optional[DiagnosticRecord]:
    """
    Decode one trace line into a DiagnosticRecord.
    Returns None for lines that are not received 8-byte frames.
    """
    tokens = tokenize_line(line)
    if tokens is None:
        return None

    id_text, id_value, is_extended = normalize_identifier(tokens.id_token)
    frame = ParsedFrame(
        timestamp=tokens.timestamp,
        id_text=id_text,
        id_value=id_value,
        is_extended=is_extended,
        data=tuple(extract_data_bytes(tokens.data_region)),
    )
    cls = classify_frame(frame)
    return DiagnosticRecord(
        frame=frame,
        phy=cls.phy,
        dir=cls.dir,
        ta=cls.ta,
        pci=cls.pci,
        sid=cls.sid,
    )


def decode_lines(lines: Iterable[str]) -> Iterator[DiagnosticRecord]:
    for line in lines:
        record = decode_line(line)
        if record is not None:
            yield record
