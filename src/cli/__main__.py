"""
nzkp CLI entry point.

Usage:
    python -m src.cli demo --bits 2048
    python -m src.cli trials --bits 256 --count 100
"""

from .app import app

if __name__ == "__main__":
    app()
