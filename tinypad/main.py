from __future__ import annotations

import sys

from tinypad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m tinypad.main` or `python -m tinypad`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
