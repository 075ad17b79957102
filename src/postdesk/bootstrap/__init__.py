"""Bootstrap (composition root) for POSTDESK.

Assembles the application at runtime: wires concrete adapters (engine, unit
of work, password hasher, ID generator) to service-layer handlers and reads
configuration.

Import rules:
- Entry points import *this* package for wiring.
- This package may import: `postdesk.adapters`, `postdesk.service_layer`,
  `postdesk.interfaces`, `postdesk.domain`, and `postdesk.config`.
- Inner layers must not import `postdesk.bootstrap`.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_message_bus,
    inject_dependencies,
)

__all__ = ["AppContainer", "bootstrap", "build_message_bus", "inject_dependencies"]
