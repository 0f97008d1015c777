"""Module entrypoint for running confbind as ``python -m confbind``."""

from __future__ import annotations

from confbind.cli import main


if __name__ == "__main__":
    main()
