"""Domain layer for POSTDESK.

Contains business rules: read models, slug generation, input validation and
domain errors. This package is technology-agnostic.

Dependency rule: do not import from `postdesk.adapters` or `postdesk.entrypoints`.
"""
