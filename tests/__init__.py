"""POSTDESK test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every implementation of a port must share
                  (in-memory, SQLite and Postgres repositories, id generators).
- integration/  : Real databases: migrations, unit of work, SQL-specific errors.
- functional/   : The HTTP API (Flask test client) and the CLI as a user drives them.
- e2e/          : The installed ``postdesk`` command's logging and options.
- fixtures/     : Shared pytest fixtures loaded from the root conftest.

General guidance
- Keep unit fast and deterministic; prefer the in-memory fakes over mocks.
- Postgres-backed tests are skipped automatically when Docker is unavailable.
- Markers: unit, contract, integration, functional, e2e, slow
"""
