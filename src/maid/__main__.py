"""Main entry point for maid.

Usage:
    python -m maid clean --path docs --restructure
    python -m maid keep --path . --recursive
    python -m maid --help
"""

from .cli import main

if __name__ == "__main__":
    main()
