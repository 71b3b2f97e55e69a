from __future__ import annotations

# OBD-II / ISO 15765-4 identifiers
FUNCTIONAL_REQUEST_ID = 0x7DF
PHYSICAL_REQUEST_IDS = range(0x7E0, 0x7E8)
PHYSICAL_RESPONSE_IDS = range(0x7E8, 0x7F0)

# 29-bit normal fixed addressing: 18 DB TA SA (functional), 18 DA TA SA (physical)
EXT_FUNCTIONAL_PREFIX = "18DB"
EXT_RESPONSE_PREFIX = "18DAF1"
EXT_DIAG_PREFIX = "18"
TESTER_ADDRESS = "F1"


def classify_phy(id_text: str, id_value: int) -> str:
    """
    "0"  functional (broadcast) request
    "-1" physical request
    "1"  anything else, physical responses included
    """
    if id_value == FUNCTIONAL_REQUEST_ID or id_text.startswith(EXT_FUNCTIONAL_PREFIX):
        return "0"
    if id_value in PHYSICAL_REQUEST_IDS:
        return "-1"
    return "1"


def classify_dir(id_text: str, id_value: int) -> str:
    if id_text.startswith(EXT_RESPONSE_PREFIX) or id_value in PHYSICAL_RESPONSE_IDS:
        return "Res"
    return "Req"


def target_address(id_text: str) -> str:
    """
    Extended ids are read by position only:
      18 xx F1 TA  -> TA at [6:8]
      18 xx TA F1  -> TA at [4:6]
    Standard 11-bit ids are their own target.
    """
    if len(id_text) == 8 and id_text.startswith(EXT_DIAG_PREFIX):
        if id_text[4:6] == TESTER_ADDRESS:
            return id_text[6:8]
        if id_text[6:8] == TESTER_ADDRESS:
            return id_text[4:6]
        return ""
    if len(id_text) == 3:
        return id_text
    return ""
