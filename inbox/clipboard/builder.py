"""
Inbox Clipboard - Action Descriptor Builder
===========================================
Applies per-action eligibility to a validated selection and assembles the
descriptor the generic executor consumes.

Outcomes:
    ActionDescriptor   - at least one conversation is eligible
    None               - nothing eligible; the caller hides the action
    UnsupportedAction  - token outside the registered action set
"""

from __future__ import annotations

import logging

from inbox.clipboard.actions import ClipboardAction
from inbox.clipboard.config import get_executor_type
from inbox.clipboard.descriptor import (
    PARAM_ACTION_NAME,
    PARAM_EXECUTOR_TYPE,
    PARAM_OBJECT_IDS,
    ActionDescriptor,
)
from inbox.clipboard.exceptions import UnsupportedAction
from inbox.clipboard.registry import (
    EXECUTOR_DISPATCHED_ACTIONS,
    resolve_descriptor_name,
)
from inbox.clipboard.selection import ValidatedSelection
from inbox.context.actor_context import ActorContext
from inbox.conversations.provider import LabelProvider

logger = logging.getLogger("inbox.clipboard")


class ActionDescriptorBuilder:
    def __init__(
        self,
        label_provider: LabelProvider,
        executor_type: str | None = None,
    ):
        self._label_provider = label_provider
        self._executor_type = executor_type or get_executor_type()

    @staticmethod
    def closable_ids(
        selection: ValidatedSelection,
        actor: ActorContext,
    ) -> tuple[int, ...]:
        return tuple(
            conversation_id
            for conversation_id, conversation in selection.items()
            if not conversation.is_closed
            and conversation.is_owned_by(actor.actor_id)
        )

    @staticmethod
    def openable_ids(
        selection: ValidatedSelection,
        actor: ActorContext,
    ) -> tuple[int, ...]:
        return tuple(
            conversation_id
            for conversation_id, conversation in selection.items()
            if conversation.is_closed
            and conversation.is_owned_by(actor.actor_id)
        )

    def build(
        self,
        selection: ValidatedSelection,
        action_name: ClipboardAction | str,
        actor: ActorContext,
    ) -> ActionDescriptor | None:
        if not selection:
            return None

        try:
            action = ClipboardAction.from_token(action_name)
        except UnsupportedAction:
            logger.warning(f"Rejected unsupported clipboard action '{action_name}'")
            raise

        if action is ClipboardAction.ASSIGN_LABEL:
            if self._label_provider.count_labels_for_owner(actor.actor_id) == 0:
                logger.info(
                    f"Action '{action.value}' suppressed: actor "
                    f"'{actor.actor_id}' owns no labels"
                )
                return None
            object_ids = tuple(selection)
        elif action is ClipboardAction.CLOSE:
            object_ids = self.closable_ids(selection, actor)
        elif action is ClipboardAction.OPEN:
            object_ids = self.openable_ids(selection, actor)
        else:
            # leave / leavePermanently: participation was established
            # when the selection was validated
            object_ids = tuple(selection)

        if not object_ids:
            logger.info(
                f"Action '{action.value}' suppressed: no eligible conversations "
                f"for actor '{actor.actor_id}'"
            )
            return None

        return self._descriptor(action, object_ids)

    def _descriptor(
        self,
        action: ClipboardAction,
        object_ids: tuple[int, ...],
    ) -> ActionDescriptor:
        parameters = {PARAM_OBJECT_IDS: object_ids}
        if action in EXECUTOR_DISPATCHED_ACTIONS:
            parameters[PARAM_ACTION_NAME] = action.value
            parameters[PARAM_EXECUTOR_TYPE] = self._executor_type

        return ActionDescriptor(
            name=resolve_descriptor_name(action),
            action=action,
            parameters=parameters,
        )
