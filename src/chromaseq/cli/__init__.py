"""Command-line interface for chromaseq."""
