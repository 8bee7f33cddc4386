"""Module entrypoint for ``python -m lazystatus``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and runtime setup happen in ``lazystatus.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
