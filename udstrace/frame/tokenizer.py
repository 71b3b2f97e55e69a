from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from udstrace.utils import RX_MARKER

# ASCII-only numeric fields, optional sign; no digit separators
INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


@dataclass(frozen=True)
class TraceLineTokens:
    timestamp: float
    id_token: str
    byte_count: int
    data_region: str


def tokenize_line(line: str) -> Optional[TraceLineTokens]:
    """
    Split a received-frame trace line:
      <time> <channel> <id> Rx   d <count> <b0> <b1> ... <b7> [trailer]

    Returns None when the line is not a decodable record (headers,
    comments, Tx frames, error frames, remote frames...).
    """
    if not line:
        return None

    marker_pos = line.find(RX_MARKER)
    if marker_pos < 0:
        return None

    # the byte-count token ends at the first space after the marker
    count_end = line.find(" ", marker_pos + len(RX_MARKER))
    if count_end < 0:
        return None
    data_region = line[count_end + 1 :]

    tokens = line.split()
    if len(tokens) < 6:
        return None
    time_tok, channel_tok, id_tok, rx_tok, d_tok, count_tok = tokens[:6]
    if rx_tok != "Rx" or d_tok != "d":
        return None

    if not FLOAT_RE.fullmatch(time_tok):
        return None
    if not (INT_RE.fullmatch(channel_tok) and INT_RE.fullmatch(count_tok)):
        return None
    timestamp = float(time_tok)
    byte_count = int(count_tok)

    return TraceLineTokens(
        timestamp=timestamp,
        id_token=id_tok,
        byte_count=byte_count,
        data_region=data_region,
    )
