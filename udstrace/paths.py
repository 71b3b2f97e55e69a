from __future__ import annotations

from pathlib import Path
from typing import Union

OUTPUT_SUFFIX = ".csv"


def default_output_path(input_path: Union[str, Path]) -> Path:
    """
    trace.asc        -> trace.csv
    logs/run.1.asc   -> logs/run.1.csv
    logs.d/capture   -> logs.d/capture.csv
    """
    path = Path(input_path)
    name = path.name
    dot = name.rfind(".")
    base = name[:dot] if dot > 0 else name
    return path.with_name(base + OUTPUT_SUFFIX)
