"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Classpath related errors
# ============================================================================


class InvalidClasspathElementError(DomainError, ValueError):
    """Raised when a classpath element is missing or not a string."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Classpath element must be a non-null string, got {value!r}."
        )
        self.value = value


class LocatorResolutionError(DomainError, ValueError):
    """Raised when a locator cannot be turned into a URL."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"Cannot resolve locator {locator!r} to a URL: {reason}.")
        self.locator = locator
        self.reason = reason
