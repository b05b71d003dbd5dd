"""
Entry point for running strkit as a module.

Usage:
    python -m strkit eval "hello" 'indexOf("l")'
    python -m strkit repl
"""

import sys

from strkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
