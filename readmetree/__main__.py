"""Module entrypoint for ``python -m readmetree``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing happens in ``readmetree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
