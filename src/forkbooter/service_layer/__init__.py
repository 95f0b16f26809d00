"""Service layer for FORKBOOTER.

Composes domain objects into the configuration a forked process is booted
with, and moves it through property stores.
"""

from .classpath_configuration import ClasspathConfiguration

__all__ = ["ClasspathConfiguration"]
