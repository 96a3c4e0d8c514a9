# src/ratetable/__main__.py
"""Allow running the service with ``python -m ratetable``."""

from ratetable.app import main

if __name__ == "__main__":
    main()
