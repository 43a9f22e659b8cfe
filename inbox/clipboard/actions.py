"""
Inbox Clipboard - Action Tokens
===============================
The closed set of bulk actions offered on marked conversations.
"""

from __future__ import annotations

from enum import Enum

from inbox.clipboard.exceptions import UnsupportedAction


class ClipboardAction(str, Enum):
    ASSIGN_LABEL = "assignLabel"
    CLOSE = "close"
    LEAVE = "leave"
    LEAVE_PERMANENTLY = "leavePermanently"
    OPEN = "open"

    @classmethod
    def from_token(cls, token) -> ClipboardAction:
        """Resolve a UI token, raising UnsupportedAction for anything unknown."""
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedAction(token) from None
