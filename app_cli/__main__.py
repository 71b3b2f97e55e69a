from __future__ import annotations

from app_cli.main import run


if __name__ == "__main__":
    run()
