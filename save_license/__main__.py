"""
Main entry point for save-license when run as a module.

This allows the CLI to be executed using:
    python -m save_license

or the equivalent console script entry point.
"""

from .cli import main

if __name__ == '__main__':
    main()
