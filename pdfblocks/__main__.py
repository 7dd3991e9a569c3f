"""
Entry point for running pdfblocks as a module.

Usage:
    python -m pdfblocks render tree.json --output out.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
