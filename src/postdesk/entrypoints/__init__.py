"""Entrypoints for POSTDESK: the Flask JSON API and the command-line interface.

Entrypoints translate transport concerns (HTTP requests, CLI arguments) into
commands and queries, and map the error taxonomy back to responses. They
obtain their wiring from `postdesk.bootstrap`.
"""
