"""Module entrypoint for ``python -m blockcursor``.

All argument parsing and cursor setup happen in ``blockcursor.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
