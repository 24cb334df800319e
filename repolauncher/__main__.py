"""Module entrypoint for ``python -m repolauncher``.

This keeps module-mode execution behavior identical to the console script.
Root resolution and error reporting happen in ``repolauncher.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
