"""Entry point for ``python -m sql_lexer``."""

import sys

from sql_lexer.cli import main

if __name__ == "__main__":
    sys.exit(main())
