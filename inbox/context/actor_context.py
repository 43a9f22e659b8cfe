"""
Inbox Context - ActorContext
============================
Immutable identity of the user a request is authorized for.
"""

from __future__ import annotations

from dataclasses import dataclass

ACTOR_TYPE_HUMAN = "HUMAN"
ACTOR_TYPE_SYSTEM = "SYSTEM"


@dataclass(frozen=True)
class ActorContext:
    """
    Canonical actor identity context.

    Only actor_id takes part in ownership and participation checks.
    The context is passed explicitly; there is no ambient current user.
    """

    actor_id: str
    actor_type: str = ACTOR_TYPE_HUMAN

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")

        if not self.actor_type or not isinstance(self.actor_type, str):
            raise ValueError("actor_type must be a non-empty string.")
