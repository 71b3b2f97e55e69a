"""
Batched Line Writer
===================
Buffers formatted CSV rows and hands them to the output stream in
batches, so a long trace does not cost one write call per frame.
"""

from __future__ import annotations

from typing import List, TextIO

from .config import DEFAULT_BATCH_LINES


class BatchedLineWriter:
    """
    Usage:
        with BatchedLineWriter(handle, batch_size=30) as out:
            for record in records:
                out.write_line(format_row(record))

    Pending lines are flushed when the batch fills and on close().
    The underlying stream is not closed; its owner does that.
    """

    def __init__(self, stream: TextIO, batch_size: int = DEFAULT_BATCH_LINES):
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.stream = stream
        self.batch_size = batch_size
        self.lines_written: int = 0
        self._pending: List[str] = []

    def write_line(self, line: str) -> None:
        self._pending.append(line)
        if len(self._pending) >= self.batch_size:
            self.flush()

    def flush(self) -> None:
        if not self._pending:
            return
        self.stream.write("".join(self._pending))
        self.lines_written += len(self._pending)
        self._pending = []

    def discard(self) -> None:
        """Drop buffered lines without writing them."""
        self._pending = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def close(self) -> None:
        self.flush()

    def __enter__(self) -> "BatchedLineWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.close()
        else:
            self.discard()
