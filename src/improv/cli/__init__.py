"""Command-line interface for improv."""
