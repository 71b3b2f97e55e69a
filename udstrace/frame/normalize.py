from __future__ import annotations

from typing import Tuple

HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


def hex_prefix_value(text: str) -> int:
    """
    Base-16 value of the leading run of hex digits ("7E0" -> 0x7E0,
    "1G" -> 0x1, "ZZ" -> 0). Never raises.
    """
    end = 0
    for ch in text or "":
        if ch not in HEX_DIGITS:
            break
        end += 1
    if end == 0:
        return 0
    return int(text[:end], 16)


def normalize_identifier(id_token: str) -> Tuple[str, int, bool]:
    """
    "18daf100x" -> ("18DAF100", 0x18DAF100, True)
    "7e8"       -> ("7E8", 0x7E8, False)
    """
    id_text = (id_token or "").upper()
    is_extended = id_text.endswith("X")
    if is_extended:
        id_text = id_text[:-1]
    return id_text, hex_prefix_value(id_text), is_extended
