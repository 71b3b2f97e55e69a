from __future__ import annotations

from pathlib import Path
from typing import Union


class TraceError(Exception):
    """Base exception for trace conversion."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        super().__init__(message)


class TraceInputError(TraceError):
    """Input trace cannot be opened or read."""

    def __init__(self, path: Union[str, Path], message: str | None = None):
        if message is None:
            message = f"Could not open input file '{path}'"
        super().__init__(path, message)


class TraceOutputError(TraceError):
    """Output CSV cannot be opened or written."""

    def __init__(self, path: Union[str, Path], message: str | None = None):
        if message is None:
            message = f"Could not open output file '{path}' for writing."
        super().__init__(path, message)
