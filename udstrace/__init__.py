# udstrace/__init__.py
from .errors import TraceError, TraceInputError, TraceOutputError
from .records import ParsedFrame, DiagnosticRecord
from .decoder import decode_line, decode_lines
from .csv_row import CSV_COLUMNS, CSV_HEADER, format_row
from .converter import ConversionSummary, convert_trace
from .utils import APP_NAME, VERSION

__all__ = [
    "TraceError",
    "TraceInputError",
    "TraceOutputError",
    "ParsedFrame",
    "DiagnosticRecord",
    "decode_line",
    "decode_lines",
    "CSV_COLUMNS",
    "CSV_HEADER",
    "format_row",
    "ConversionSummary",
    "convert_trace",
    "APP_NAME",
    "VERSION",
]
