"""Development entry point (no install needed).

Publishes the crate this file sits in:
- `python main.py`
- `python main.py doctor`

The code lives under `src/`; this shim puts it on the path and hands the
script's real directory (symlinks resolved) to the CLI as the project root.
"""

from __future__ import annotations

import sys
from pathlib import Path

HERE = Path(__file__).resolve().parent


def main() -> None:
    src = str(HERE / "src")
    if src not in sys.path:
        sys.path.insert(0, src)

    from cli.main import run  # noqa: PLC0415

    run(base_dir=HERE)


if __name__ == "__main__":
    main()
