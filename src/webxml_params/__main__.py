"""Entry point for running webxml-params as a module.

Usage:
    python -m webxml_params [command] [options]
"""

from webxml_params.cli.main import app

if __name__ == "__main__":
    app()
