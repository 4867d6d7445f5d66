"""Command-line interface for file-lister."""
