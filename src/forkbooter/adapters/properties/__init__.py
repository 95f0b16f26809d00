"""Property store adapters.

Exports
-------
- InMemoryPropertyStore: dict-backed store for tests and working copies.
- EnvironmentPropertyStore: process-wide store over the OS environment.
- PropertiesFile: `.properties` text file loaded into / saved from a store.
"""

from .environment import EnvironmentPropertyStore
from .file import PropertiesFile, PropertiesFileError, format_properties, parse_properties
from .memory import InMemoryPropertyStore

__all__ = [
    "EnvironmentPropertyStore",
    "InMemoryPropertyStore",
    "PropertiesFile",
    "PropertiesFileError",
    "format_properties",
    "parse_properties",
]
