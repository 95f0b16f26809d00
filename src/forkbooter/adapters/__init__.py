"""Adapters (infrastructure implementations) for FORKBOOTER interfaces."""
