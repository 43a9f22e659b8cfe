"""
Inbox Clipboard - Selection Validator
=====================================
Reduces marked conversations to those the actor owns or participates in.

Owned conversations are always kept. The rest are resolved against the
participation store in one batched lookup; no lookup is made when every
candidate is owned by the actor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Iterable

from inbox.clipboard.selection import ValidatedSelection
from inbox.context.actor_context import ActorContext
from inbox.conversations.models import Conversation
from inbox.conversations.provider import ParticipationProvider

logger = logging.getLogger("inbox.clipboard")


class SelectionValidator:
    def __init__(self, participation_provider: ParticipationProvider):
        self._participation_provider = participation_provider

    def filter(
        self,
        candidates: Iterable[Conversation] | Mapping[int, Conversation],
        actor: ActorContext,
    ) -> ValidatedSelection:
        if isinstance(candidates, Mapping):
            candidates = candidates.values()

        deduplicated: dict[int, Conversation] = {}
        for conversation in candidates:
            deduplicated[conversation.conversation_id] = conversation

        foreign_ids = tuple(
            conversation_id
            for conversation_id, conversation in deduplicated.items()
            if not conversation.is_owned_by(actor.actor_id)
        )

        participating: frozenset[int] = frozenset()
        if foreign_ids:
            participating = self._participation_provider.get_participating_ids(
                foreign_ids,
                actor.actor_id,
            )

        selection = ValidatedSelection(
            conversation
            for conversation in deduplicated.values()
            if conversation.is_owned_by(actor.actor_id)
            or conversation.conversation_id in participating
        )

        logger.debug(
            f"Selection for actor '{actor.actor_id}': kept {len(selection)} "
            f"of {len(deduplicated)} conversation(s)"
        )
        return selection
