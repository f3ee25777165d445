"""Module entry point for running with python -m classy."""

from classy.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
