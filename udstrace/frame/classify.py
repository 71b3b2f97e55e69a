from __future__ import annotations

from dataclasses import dataclass

from udstrace.records import ParsedFrame

from .addressing import classify_dir, classify_phy, target_address
from .isotp import pci_type, service_id


@dataclass(frozen=True)
class Classification:
    phy: str
    dir: str
    ta: str
    pci: str
    sid: str


def classify_frame(frame: ParsedFrame) -> Classification:
    pci = pci_type(frame.data)
    return Classification(
        phy=classify_phy(frame.id_text, frame.id_value),
        dir=classify_dir(frame.id_text, frame.id_value),
        ta=target_address(frame.id_text),
        pci=pci,
        sid=service_id(pci, frame.data),
    )
