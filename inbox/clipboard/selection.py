"""
Inbox Clipboard - ValidatedSelection
====================================
Conversations the actor may act on at all, keyed by conversation_id.
Built once per authorization request and never shared across requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Iterator

from inbox.conversations.models import Conversation


class ValidatedSelection(Mapping):
    """
    Read-only conversation_id -> Conversation mapping.

    Iteration follows the order conversations were supplied in. A later
    conversation with an already seen id replaces the earlier snapshot.
    """

    __slots__ = ("_conversations",)

    def __init__(self, conversations: Iterable[Conversation] = ()):
        self._conversations: dict[int, Conversation] = {}
        for conversation in conversations:
            if not isinstance(conversation, Conversation):
                raise ValueError("ValidatedSelection accepts Conversation snapshots only.")
            self._conversations[conversation.conversation_id] = conversation

    def __getitem__(self, conversation_id: int) -> Conversation:
        return self._conversations[conversation_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._conversations)

    def __len__(self) -> int:
        return len(self._conversations)

    def __repr__(self) -> str:
        return f"ValidatedSelection({list(self._conversations)!r})"
