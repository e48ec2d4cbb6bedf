"""Module entrypoint for ``python -m verco``."""

from .cli import main


if __name__ == "__main__":
    main()
