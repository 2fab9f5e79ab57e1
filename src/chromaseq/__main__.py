"""Main entry point for chromaseq."""

from chromaseq.cli.main import cli

if __name__ == "__main__":
    cli()
