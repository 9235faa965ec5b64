"""Module entrypoint for ``python -m lstree``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output setup happen in ``lstree.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
