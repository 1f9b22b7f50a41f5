"""Wren exception hierarchy.

Shared across the pattern compiler, Router, and CLI so every module
raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route table is configured incorrectly.

    Malformed templates, invalid aliases, and empty registrations all
    land here. These are programming errors: raised at registration time,
    never during resolution.
    """

    def __init__(self, message: str, *, template: str | None = None) -> None:
        super().__init__(message)
        self.template = template
