"""Module entrypoint for running lexnorm as ``python -m lexnorm``."""

from __future__ import annotations

from lexnorm.cli import main


if __name__ == "__main__":
    main()
