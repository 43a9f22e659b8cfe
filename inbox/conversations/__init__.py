"""
Inbox Conversations - Public API
================================
"""

from inbox.conversations.db_provider import (
    DbConversationProvider,
    DbLabelProvider,
    DbParticipationProvider,
)
from inbox.conversations.models import Conversation, Label, Participation
from inbox.conversations.provider import (
    ConversationProvider,
    InMemoryConversationProvider,
    InMemoryLabelProvider,
    InMemoryParticipationProvider,
    LabelProvider,
    ParticipationProvider,
)

__all__ = [
    "Conversation",
    "Participation",
    "Label",
    "ConversationProvider",
    "ParticipationProvider",
    "LabelProvider",
    "InMemoryConversationProvider",
    "InMemoryParticipationProvider",
    "InMemoryLabelProvider",
    "DbConversationProvider",
    "DbParticipationProvider",
    "DbLabelProvider",
]
