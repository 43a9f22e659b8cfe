"""
Inbox Clipboard - Public API
============================
"""

from inbox.clipboard.actions import ClipboardAction
from inbox.clipboard.builder import ActionDescriptorBuilder
from inbox.clipboard.conversation_action import (
    CONVERSATION_TYPE_NAME,
    EDITOR_LABEL_KEY,
    ConversationClipboardAction,
)
from inbox.clipboard.descriptor import (
    PARAM_ACTION_NAME,
    PARAM_EXECUTOR_TYPE,
    PARAM_OBJECT_IDS,
    ActionDescriptor,
    EditorLabel,
)
from inbox.clipboard.exceptions import ClipboardError, UnsupportedAction
from inbox.clipboard.registry import (
    ACTION_DESCRIPTOR_NAMES,
    EXECUTOR_DISPATCHED_ACTIONS,
    resolve_descriptor_name,
)
from inbox.clipboard.selection import ValidatedSelection
from inbox.clipboard.validator import SelectionValidator

__all__ = [
    "ClipboardAction",
    "ClipboardError",
    "UnsupportedAction",
    "ActionDescriptor",
    "EditorLabel",
    "PARAM_OBJECT_IDS",
    "PARAM_ACTION_NAME",
    "PARAM_EXECUTOR_TYPE",
    "ACTION_DESCRIPTOR_NAMES",
    "EXECUTOR_DISPATCHED_ACTIONS",
    "resolve_descriptor_name",
    "ValidatedSelection",
    "SelectionValidator",
    "ActionDescriptorBuilder",
    "ConversationClipboardAction",
    "CONVERSATION_TYPE_NAME",
    "EDITOR_LABEL_KEY",
]
