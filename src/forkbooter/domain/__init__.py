"""Domain layer for FORKBOOTER.

Holds the `Classpath` value holder, locator resolution helpers and the
domain error hierarchy. Nothing here touches process-wide state directly;
property stores are injected through `forkbooter.interfaces`.
"""

from .classpath import Classpath
from .errors import DomainError, InvalidClasspathElementError, LocatorResolutionError

__all__ = [
    "Classpath",
    "DomainError",
    "InvalidClasspathElementError",
    "LocatorResolutionError",
]
