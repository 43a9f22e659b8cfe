"""
Inbox Clipboard - Action to Descriptor Registry
===============================================
"""

from __future__ import annotations

from inbox.clipboard.actions import ClipboardAction

ACTION_DESCRIPTOR_NAMES: dict[ClipboardAction, str] = {
    ClipboardAction.ASSIGN_LABEL: "conversation.assignLabel",
    ClipboardAction.CLOSE: "conversation.close",
    ClipboardAction.LEAVE: "conversation.leave",
    ClipboardAction.LEAVE_PERMANENTLY: "conversation.leavePermanently",
    ClipboardAction.OPEN: "conversation.open",
}

# Descriptors for these actions are routed through the generic executor
# and carry actionName/executorType parameters.
EXECUTOR_DISPATCHED_ACTIONS = frozenset(
    {ClipboardAction.CLOSE, ClipboardAction.OPEN}
)


def resolve_descriptor_name(action: ClipboardAction) -> str:
    """Resolve the UI item name for a clipboard action."""
    return ACTION_DESCRIPTOR_NAMES[action]
