"""
Inbox Clipboard - Exceptions
============================
Contract violations raised to the caller.

Ineligible selections are NOT errors. They surface as an absent
descriptor (None) and the caller hides the action.
"""

from __future__ import annotations


class ClipboardError(Exception):
    """Base error for clipboard action operations."""
    pass


class UnsupportedAction(ClipboardError):
    """Action token is not one of the registered clipboard actions."""

    def __init__(self, token):
        self.token = token
        super().__init__(
            f"Clipboard action '{token}' is not supported."
        )
