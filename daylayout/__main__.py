"""
Package entry point.

Allows running the application via:

    python -m daylayout

This simply forwards execution to daylayout.cli.main().
"""

from daylayout.cli import main

if __name__ == "__main__":
    main()
