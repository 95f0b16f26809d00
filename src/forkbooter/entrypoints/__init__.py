"""Entry points (CLI and other frontends) for FORKBOOTER."""
