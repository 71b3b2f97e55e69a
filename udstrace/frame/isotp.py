from __future__ import annotations

from typing import Sequence

PCI_TYPES = {
    0x0: "SF",  # single frame
    0x1: "FF",  # first frame
    0x2: "CF",  # consecutive frame
    0x3: "FC",  # flow control
}


def pci_type(data: Sequence[int]) -> str:
    """
    ISO-TP frame type from the high nibble of the first byte, "" if reserved.
    Accepts raw payloads of any length; an empty one has no type.
    """
    if not data:
        return ""
    return PCI_TYPES.get((data[0] >> 4) & 0xF, "")


def service_id(pci: str, data: Sequence[int]) -> str:
    # SF: [PCI|len] SID ...   FF: [PCI|len_hi] len_lo SID ...
    # unpadded payloads too short to hold the SID byte yield ""
    if pci == "SF" and len(data) > 1:
        return f"{data[1]:02X}"
    if pci == "FF" and len(data) > 2:
        return f"{data[2]:02X}"
    return ""
