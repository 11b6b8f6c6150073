from __future__ import annotations
import sys
from caffeine.app import run_app


def main() -> int:
    """Entrypoint for `python -m caffeine` and the `caffeine-editor` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
