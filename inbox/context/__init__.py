"""
Inbox Context - Public API
==========================
"""

from inbox.context.actor_context import (
    ACTOR_TYPE_HUMAN,
    ACTOR_TYPE_SYSTEM,
    ActorContext,
)

__all__ = [
    "ACTOR_TYPE_HUMAN",
    "ACTOR_TYPE_SYSTEM",
    "ActorContext",
]
