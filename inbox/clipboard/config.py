"""
Inbox Clipboard - Settings Access
=================================
"""

from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_EXECUTOR_TYPE = "inbox.conversations.ConversationAction"


def get_executor_type() -> str:
    """Executor token for close/open descriptors, from INBOX_CONVERSATION_EXECUTOR_TYPE."""
    try:
        return getattr(
            settings,
            "INBOX_CONVERSATION_EXECUTOR_TYPE",
            DEFAULT_EXECUTOR_TYPE,
        )
    except ImproperlyConfigured:
        return DEFAULT_EXECUTOR_TYPE
