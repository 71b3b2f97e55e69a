"""
UDS Trace Utilities
===================
Shared constants.
"""

# Version info
VERSION = "1.0.0"
APP_NAME = "UDS trace to CSV"

# Received 8-byte frame marker: direction, gap, data-length code field.
RX_MARKER = " Rx   d "
