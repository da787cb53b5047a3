# swms_compliance/__main__.py
"""Entry point for `python -m swms_compliance`."""

from swms_compliance.cli import app

if __name__ == "__main__":
    app()
