# FILE: centroid_engine/__main__.py
# Enables `python -m centroid_engine` to launch the Typer CLI.
from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
