# udstrace/frame/__init__.py
from .tokenizer import TraceLineTokens, tokenize_line
from .normalize import hex_prefix_value, normalize_identifier
from .payload import MAX_DATA_BYTES, extract_data_bytes
from .addressing import classify_dir, classify_phy, target_address
from .isotp import pci_type, service_id
from .classify import Classification, classify_frame

__all__ = [
    "TraceLineTokens",
    "tokenize_line",
    "hex_prefix_value",
    "normalize_identifier",
    "MAX_DATA_BYTES",
    "extract_data_bytes",
    "classify_dir",
    "classify_phy",
    "target_address",
    "pci_type",
    "service_id",
    "Classification",
    "classify_frame",
]
