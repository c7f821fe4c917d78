"""gqlsort CLI entry point.

Usage:
    python main.py --input FILE [--output FILE] [--to sdl|json]
    python main.py --input-dir DIR --output-dir DIR
"""
import sys

from gqlsort_py.cli import main

if __name__ == "__main__":
    sys.exit(main())
