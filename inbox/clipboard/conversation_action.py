"""
Inbox Clipboard - Conversation Clipboard Action
===============================================
Request-scoped entry point the clipboard editor calls for marked
conversations.

One instance serves one authorization request for one actor. The
validated selection is computed on the first execute() and reused by
every later action check, so all actions offered in the same request
see the same baseline and the participation store is queried once.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping

from inbox.clipboard.actions import ClipboardAction
from inbox.clipboard.builder import ActionDescriptorBuilder
from inbox.clipboard.descriptor import ActionDescriptor, EditorLabel
from inbox.clipboard.selection import ValidatedSelection
from inbox.clipboard.validator import SelectionValidator
from inbox.context.actor_context import ActorContext
from inbox.conversations.models import Conversation
from inbox.conversations.provider import LabelProvider, ParticipationProvider

CONVERSATION_TYPE_NAME = "inbox.conversation"
EDITOR_LABEL_KEY = "inbox.clipboard.label.conversation.marked"


class ConversationClipboardAction:
    type_name = CONVERSATION_TYPE_NAME

    def __init__(
        self,
        actor: ActorContext,
        participation_provider: ParticipationProvider,
        label_provider: LabelProvider,
        executor_type: str | None = None,
    ):
        if not isinstance(actor, ActorContext):
            raise ValueError("actor must be ActorContext.")

        self._actor = actor
        self._validator = SelectionValidator(participation_provider)
        self._builder = ActionDescriptorBuilder(
            label_provider,
            executor_type=executor_type,
        )
        self._selection: ValidatedSelection | None = None

    @property
    def actor(self) -> ActorContext:
        return self._actor

    @property
    def validated_selection(self) -> ValidatedSelection | None:
        return self._selection

    def execute(
        self,
        objects: Collection[Conversation] | Mapping[int, Conversation],
        action_name: ClipboardAction | str,
    ) -> ActionDescriptor | None:
        """
        Return the descriptor for action_name, or None to hide it.

        Raises UnsupportedAction for an unknown token when at least one
        marked conversation is accessible.
        """
        if self._selection is None:
            self._selection = self._validator.filter(objects, self._actor)

        if not self._selection:
            return None

        return self._builder.build(self._selection, action_name, self._actor)

    def editor_label(
        self,
        objects: Collection[Conversation] | Mapping[int, Conversation],
    ) -> EditorLabel:
        return EditorLabel(key=EDITOR_LABEL_KEY, count=len(objects))
