from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


ENV_PREFIX = "UDSTRACE_"


def load_dotenv(path: Optional[Path] = None, prefix: str = ENV_PREFIX) -> List[str]:
    """
    Copy KEY=VALUE pairs from .env into os.environ; existing variables win.
    The default .env sits in the working directory, which may belong to
    another project, so only keys starting with `prefix` are applied.
    Returns the keys that were applied, for the CLI trace output.
    """
    applied: List[str] = []
    target = path or _default_dotenv_path()
    if not target.exists():
        return applied

    for line in target.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith("export "):
            stripped = stripped[len("export ") :].strip()
        if "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not key.startswith(prefix):
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        if key not in os.environ:
            os.environ[key] = value
            applied.append(key)
    return applied


def _default_dotenv_path() -> Path:
    override = os.environ.get("UDSTRACE_DOTENV")
    if override:
        return Path(override)
    return Path.cwd() / ".env"
