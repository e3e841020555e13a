"""Command-line interface for farmstats."""
