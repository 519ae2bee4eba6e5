"""Allow running the CLI with ``python -m propparse``."""

from propparse.cli import main

if __name__ == "__main__":
    main()
