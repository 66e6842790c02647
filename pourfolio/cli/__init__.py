"""Command-line entry points for Pourfolio."""
