"""Service layer for POSTDESK.

Use cases live here: commands and their handlers (create/update/delete posts,
registration, token issuance, category seeding), read-side queries, and the
message bus that dispatches commands. Handlers depend only on
`postdesk.interfaces` ports and `postdesk.domain` rules.
"""
