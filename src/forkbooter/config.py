"""Configuration utilities for FORKBOOTER.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

from forkbooter.service_layer.classpath_configuration import TEST_CLASSPATH_PREFIX

PROPERTIES_ENV_VAR = "FORKBOOTER_PROPERTIES"  # pragma: no mutate

DEFAULT_PREFIX = TEST_CLASSPATH_PREFIX
DEFAULT_SYSTEM_PROPERTY = "CLASSPATH"  # pragma: no mutate


class PropertiesPathNotSetError(Exception):
    """Raised when the FORKBOOTER_PROPERTIES environment variable is not set."""


def get_properties_path() -> Path:
    """Get the fork properties file path from the environment.

    Returns:
        The value of the `FORKBOOTER_PROPERTIES` environment variable as a `Path`.

    Raises:
        PropertiesPathNotSetError: If `FORKBOOTER_PROPERTIES` is not set or empty.
    """
    if not (path := os.environ.get(PROPERTIES_ENV_VAR)):
        raise PropertiesPathNotSetError
    return Path(path)
