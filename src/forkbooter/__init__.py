"""FORKBOOTER

Classpath handling for forked child processes. Builds the ordered,
duplicate-free code-loading search path of a child process and passes it
across the process boundary through flat key/value property stores.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
