"""Command-line interface for POSTDESK."""
