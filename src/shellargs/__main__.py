"""Entry point for ``python -m shellargs``."""

from shellargs.cli import app

if __name__ == "__main__":
    app()
