"""Interfaces (application boundary) for POSTDESK.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (repositories, unit of work, ID generators,
password hashing). Business rules stay out of this package.

Dependency rule: may import `postdesk.domain` read models; must not import
`postdesk.adapters`, `postdesk.service_layer` or `postdesk.entrypoints`.
"""
