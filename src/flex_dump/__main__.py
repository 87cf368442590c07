"""Allow ``python -m flex_dump``."""

from flex_dump.cli import cli

if __name__ == "__main__":
    cli()
