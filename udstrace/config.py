from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BATCH_LINES = 30
DEFAULT_ENCODING = "utf-8"


@dataclass
class ConverterSettings:
    batch_lines: int = DEFAULT_BATCH_LINES
    encoding: str = DEFAULT_ENCODING
    trace: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ConverterSettings:
    env = os.environ if environ is None else environ
    settings = ConverterSettings()

    raw_batch = (env.get("UDSTRACE_BATCH_LINES") or "").strip()
    if raw_batch:
        try:
            batch = int(raw_batch)
        except ValueError:
            batch = 0
        if batch > 0:
            settings.batch_lines = batch

    encoding = (env.get("UDSTRACE_ENCODING") or "").strip()
    if encoding:
        settings.encoding = encoding

    settings.trace = env.get("UDSTRACE_CLI_TRACE") == "1"
    return settings
