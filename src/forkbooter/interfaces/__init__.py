"""Interfaces (application boundary) for FORKBOOTER.

Defines framework-free application contracts shared by the domain, the
service layer and adapters. Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any
`forkbooter.*` modules. It may be imported by `forkbooter.domain`,
`forkbooter.service_layer` and `forkbooter.adapters`.
"""

from .properties import PropertySink, PropertyStore

__all__ = ["PropertySink", "PropertyStore"]
