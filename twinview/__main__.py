"""Module entrypoint for ``python -m twinview``."""

from .cli import main


if __name__ == "__main__":
    main()
