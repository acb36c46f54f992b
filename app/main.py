"""
Command-line launcher for Account Ledger.

Run from the repository root:

    python -m app.main
"""

import sys

from account_ledger.menu import main


if __name__ == "__main__":
    sys.exit(main())
