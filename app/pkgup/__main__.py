"""Allow running pkgup with ``python -m pkgup``."""

from pkgup.cli.main import app

if __name__ == "__main__":
    app()
