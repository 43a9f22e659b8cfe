"""
Inbox Conversations - DB-backed Providers
=========================================
Resolves conversations, participation, and label counts from the
conversation store tables. Query failures propagate to the request.
"""

from __future__ import annotations

from typing import Iterable

from inbox.conversations.models import Conversation


def _canonical_ids(conversation_ids: Iterable[int]) -> tuple[int, ...]:
    return tuple(dict.fromkeys(conversation_ids))


class DbConversationProvider:
    def get_conversations(
        self,
        conversation_ids: Iterable[int],
    ) -> tuple[Conversation, ...]:
        requested = _canonical_ids(conversation_ids)
        if not requested:
            return tuple()

        from inbox.conversation_store.models import Conversation as ConversationRow

        rows = ConversationRow.objects.filter(conversation_id__in=requested)
        by_id = {
            row.conversation_id: Conversation(
                conversation_id=row.conversation_id,
                owner_id=row.owner_id,
                is_closed=row.is_closed,
                subject=row.subject,
            )
            for row in rows
        }
        return tuple(
            by_id[conversation_id]
            for conversation_id in requested
            if conversation_id in by_id
        )


class DbParticipationProvider:
    def get_participating_ids(
        self,
        conversation_ids: Iterable[int],
        actor_id: str,
    ) -> frozenset[int]:
        requested = _canonical_ids(conversation_ids)
        if not requested:
            return frozenset()

        from inbox.conversation_store.models import ConversationParticipant

        return frozenset(
            ConversationParticipant.objects.filter(
                conversation_id__in=requested,
                participant_id=actor_id,
            ).values_list("conversation_id", flat=True)
        )


class DbLabelProvider:
    def count_labels_for_owner(self, owner_id: str) -> int:
        from inbox.conversation_store.models import ConversationLabel

        return ConversationLabel.objects.filter(owner_id=owner_id).count()
