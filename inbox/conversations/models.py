"""
Inbox Conversations - Immutable Snapshots
=========================================
Read-only views of conversation rows, valid for one request.
"""

from __future__ import annotations

from dataclasses import dataclass


def _require_id(value, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field_name} must be a positive integer.")


def _require_text(value, field_name: str) -> None:
    if not value or not isinstance(value, str):
        raise ValueError(f"{field_name} must be a non-empty string.")


@dataclass(frozen=True)
class Conversation:
    conversation_id: int
    owner_id: str
    is_closed: bool = False
    subject: str = ""

    def __post_init__(self):
        _require_id(self.conversation_id, "conversation_id")
        _require_text(self.owner_id, "owner_id")

        if not isinstance(self.is_closed, bool):
            raise ValueError("is_closed must be a bool.")

        if not isinstance(self.subject, str):
            raise ValueError("subject must be a string.")

    def is_owned_by(self, actor_id: str) -> bool:
        return self.owner_id == actor_id


@dataclass(frozen=True)
class Participation:
    """A non-owner's membership in a conversation."""

    conversation_id: int
    participant_id: str

    def __post_init__(self):
        _require_id(self.conversation_id, "conversation_id")
        _require_text(self.participant_id, "participant_id")

    def key(self) -> tuple[int, str]:
        return (self.conversation_id, self.participant_id)


@dataclass(frozen=True)
class Label:
    label_id: int
    owner_id: str
    label: str

    def __post_init__(self):
        _require_id(self.label_id, "label_id")
        _require_text(self.owner_id, "owner_id")
        _require_text(self.label, "label")
