from __future__ import annotations

from typing import List

from .normalize import hex_prefix_value

MAX_DATA_BYTES = 8


def extract_data_bytes(region: str) -> List[int]:
    """
    Collect up to MAX_DATA_BYTES two-character hex tokens from the data
    region, zero-padded to exactly MAX_DATA_BYTES.

    Tokens of any other length are skipped without taking a slot, so one
    malformed token shifts every following byte one position left.
    """
    data: List[int] = []
    for tok in (region or "").split():
        if len(data) >= MAX_DATA_BYTES:
            break
        if len(tok) != 2:
            continue
        data.append(hex_prefix_value(tok))

    data.extend([0] * (MAX_DATA_BYTES - len(data)))
    return data
