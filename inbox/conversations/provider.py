"""
Inbox Conversations - Provider Protocols and In-Memory Providers
================================================================
"""

from __future__ import annotations

from typing import Iterable, Protocol

from inbox.conversations.models import Conversation, Label, Participation


class ConversationProvider(Protocol):
    def get_conversations(
        self,
        conversation_ids: Iterable[int],
    ) -> tuple[Conversation, ...]:
        ...


class ParticipationProvider(Protocol):
    def get_participating_ids(
        self,
        conversation_ids: Iterable[int],
        actor_id: str,
    ) -> frozenset[int]:
        ...


class LabelProvider(Protocol):
    def count_labels_for_owner(self, owner_id: str) -> int:
        ...


class InMemoryConversationProvider:
    """
    Deterministic in-memory provider used for bootstrap/tests.
    """

    def __init__(self, conversations: Iterable[Conversation] | None = None):
        self._conversations: dict[int, Conversation] = {}

        for conversation in conversations or ():
            if conversation.conversation_id in self._conversations:
                raise ValueError(
                    "Duplicate conversation_id "
                    f"'{conversation.conversation_id}'."
                )
            self._conversations[conversation.conversation_id] = conversation

    def get_conversations(
        self,
        conversation_ids: Iterable[int],
    ) -> tuple[Conversation, ...]:
        return tuple(
            self._conversations[conversation_id]
            for conversation_id in conversation_ids
            if conversation_id in self._conversations
        )


class InMemoryParticipationProvider:
    """
    Deterministic in-memory provider used for bootstrap/tests.

    lookup_count counts batched lookups so callers can assert that a
    selection is resolved in a single round trip.
    """

    def __init__(self, participations: Iterable[Participation] | None = None):
        self._keys: set[tuple[int, str]] = set()
        self.lookup_count = 0

        for participation in participations or ():
            if participation.key() in self._keys:
                raise ValueError(
                    "Duplicate participation "
                    f"(conversation_id='{participation.conversation_id}', "
                    f"participant_id='{participation.participant_id}')."
                )
            self._keys.add(participation.key())

    def get_participating_ids(
        self,
        conversation_ids: Iterable[int],
        actor_id: str,
    ) -> frozenset[int]:
        self.lookup_count += 1
        return frozenset(
            conversation_id
            for conversation_id in conversation_ids
            if (conversation_id, actor_id) in self._keys
        )


class InMemoryLabelProvider:
    """
    Deterministic in-memory provider used for bootstrap/tests.
    """

    def __init__(self, labels: Iterable[Label] | None = None):
        self._labels: dict[int, Label] = {}
        self.lookup_count = 0

        for label in labels or ():
            if label.label_id in self._labels:
                raise ValueError(f"Duplicate label_id '{label.label_id}'.")
            self._labels[label.label_id] = label

    def count_labels_for_owner(self, owner_id: str) -> int:
        self.lookup_count += 1
        return sum(1 for label in self._labels.values() if label.owner_id == owner_id)
