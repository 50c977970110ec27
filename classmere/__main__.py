"""
Package entry point.

Allows running the application via:

    python -m classmere

This simply forwards execution to classmere.cli.main().
"""

from classmere.cli import main

if __name__ == "__main__":
    main()
