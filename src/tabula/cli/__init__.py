"""Command line interface for tabula."""
