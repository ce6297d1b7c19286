"""Entry point for `python -m svcctl`."""

from svcctl.cli.app import app

if __name__ == "__main__":
    app()
