"""Module entrypoint for ``python -m yal``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and config loading happen in ``yal.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
