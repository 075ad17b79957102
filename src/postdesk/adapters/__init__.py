"""Adapters (infrastructure) for POSTDESK.

Provide concrete implementations of the interface ports (SQLAlchemy and
in-memory repositories, the unit of work, ID generators, password hashing),
plus persistence mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `postdesk.domain` and `postdesk.interfaces`; neither
of those may import this package.
"""
