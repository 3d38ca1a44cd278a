"""Module entrypoint for running cleanpaste as ``python -m cleanpaste``."""

from __future__ import annotations

from cleanpaste.cli import main


if __name__ == "__main__":
    main()
