"""Enable running checkwatch as a module: python -m checkwatch."""

from checkwatch.cli import app

if __name__ == "__main__":
    app()
