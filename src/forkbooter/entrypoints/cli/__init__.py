"""Command-line interface for FORKBOOTER."""
