"""Entry point for ``python -m asset_library``."""

from .cli import cli

if __name__ == "__main__":
    cli()
