"""Entry point for ``python -m md2json``."""

from md2json.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
