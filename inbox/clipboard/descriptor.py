"""
Inbox Clipboard - Descriptor Value Objects
==========================================
Output handed verbatim to the generic bulk-action executor.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from inbox.clipboard.actions import ClipboardAction

PARAM_OBJECT_IDS = "objectIDs"
PARAM_ACTION_NAME = "actionName"
PARAM_EXECUTOR_TYPE = "executorType"


@dataclass(frozen=True)
class ActionDescriptor:
    """
    Named clipboard item plus its invocation parameters.

    Fields:
        name:       UI item name (e.g. 'conversation.close').
        action:     The clipboard action this descriptor was built for.
        parameters: objectIDs always; actionName/executorType for
                    executor-dispatched actions.

    A descriptor never carries an empty objectIDs list.
    """

    name: str
    action: ClipboardAction
    parameters: Mapping[str, Any]

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        if not isinstance(self.action, ClipboardAction):
            raise ValueError("action must be ClipboardAction enum.")

        parameters = dict(self.parameters)
        object_ids = tuple(parameters.get(PARAM_OBJECT_IDS) or ())
        if not object_ids:
            raise ValueError(
                f"parameters must contain a non-empty '{PARAM_OBJECT_IDS}' list."
            )
        parameters[PARAM_OBJECT_IDS] = object_ids

        object.__setattr__(self, "parameters", MappingProxyType(parameters))

    @property
    def object_ids(self) -> tuple[int, ...]:
        return self.parameters[PARAM_OBJECT_IDS]

    def to_dict(self) -> dict:
        """Serialize for the clipboard editor payload."""
        parameters = dict(self.parameters)
        parameters[PARAM_OBJECT_IDS] = list(self.object_ids)
        return {
            "name": self.name,
            "parameters": parameters,
        }


@dataclass(frozen=True)
class EditorLabel:
    """Untranslated clipboard header label: language key plus marked count."""

    key: str
    count: int

    def __post_init__(self):
        if not self.key or not isinstance(self.key, str):
            raise ValueError("key must be a non-empty string.")

        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise ValueError("count must be a non-negative integer.")
