from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class ParsedFrame:
    timestamp: float
    id_text: str
    id_value: int
    is_extended: bool
    data: Tuple[int, ...]

    @property
    def data_hex(self) -> List[str]:
        return [f"{b:02X}" for b in self.data]


@dataclass(frozen=True)
class DiagnosticRecord:
    frame: ParsedFrame
    phy: str = ""
    dir: str = ""
    ta: str = ""
    pci: str = ""
    sid: str = ""
