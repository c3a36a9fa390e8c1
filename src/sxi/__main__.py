"""Entry point for running sxi as a module.

Usage:
    python -m sxi <html filename> ...
"""

from sxi.cli import app

if __name__ == "__main__":
    app()
