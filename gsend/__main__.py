"""Entry point for python -m gsend."""

from gsend.cli import run

if __name__ == "__main__":
    run()
