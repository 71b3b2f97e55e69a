from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from .config import ConverterSettings, load_settings
from .csv_row import CSV_HEADER, format_row
from .decoder import decode_line
from .errors import TraceInputError, TraceOutputError
from .paths import default_output_path
from .writer import BatchedLineWriter


@dataclass
class ConversionSummary:
    input_path: Path
    output_path: Path
    lines_read: int = 0
    records_written: int = 0

    @property
    def lines_skipped(self) -> int:
        return self.lines_read - self.records_written


def _read_lines(infile: TextIO, src: Path) -> Iterator[str]:
    while True:
        try:
            line = infile.readline()
        except OSError as exc:
            raise TraceInputError(src, f"Could not read input file '{src}': {exc}") from exc
        if not line:
            return
        yield line


def convert_stream(
    infile: TextIO,
    outfile: TextIO,
    summary: ConversionSummary,
    batch_lines: int,
) -> ConversionSummary:
    outfile.write(CSV_HEADER)
    with BatchedLineWriter(outfile, batch_size=batch_lines) as out:
        for line in _read_lines(infile, summary.input_path):
            summary.lines_read += 1
            record = decode_line(line)
            if record is None:
                continue
            out.write_line(format_row(record))
            summary.records_written += 1
    return summary


def convert_trace(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    settings: Optional[ConverterSettings] = None,
) -> ConversionSummary:
    """
    Convert a trace log into the diagnostic CSV table.

    Raises:
        TraceInputError: input cannot be opened or read
        TraceOutputError: output cannot be opened or written
    """
    settings = settings or load_settings()
    src = Path(input_path)

    try:
        infile = open(src, "r", encoding=settings.encoding, errors="replace")
    except (OSError, LookupError) as exc:
        raise TraceInputError(src) from exc

    with infile:
        dst = Path(output_path) if output_path is not None else default_output_path(src)
        try:
            outfile = open(dst, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise TraceOutputError(dst) from exc

        summary = ConversionSummary(input_path=src, output_path=dst)
        with outfile:
            try:
                convert_stream(infile, outfile, summary, settings.batch_lines)
            except MemoryError as exc:
                raise TraceOutputError(
                    dst,
                    f"Memory allocation failed for line buffer at line {summary.lines_read}.",
                ) from exc
            except OSError as exc:
                raise TraceOutputError(dst, f"Could not write output file '{dst}': {exc}") from exc

    if settings.trace:
        print(
            f"[UDSTRACE_TRACE] lines={summary.lines_read} records={summary.records_written} "
            f"skipped={summary.lines_skipped} output={dst}",
            file=sys.stderr,
        )
    return summary
