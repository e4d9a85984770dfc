"""Allow ``python -m homelab``."""

from homelab.cli import cli

if __name__ == "__main__":
    cli()
