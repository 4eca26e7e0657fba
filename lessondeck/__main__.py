"""Module entrypoint for `python -m lessondeck`."""

from .cli import main_entry


if __name__ == "__main__":  # pragma: no cover
    main_entry()
