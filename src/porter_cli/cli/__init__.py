"""Command-line interface for porter."""
