"""
Inbox Conversation Store - Relational Conversation State
========================================================
Conversation rows, non-owner participation, and user-owned labels.
"""

from __future__ import annotations

from django.db import models


class Conversation(models.Model):
    conversation_id = models.BigAutoField(primary_key=True)
    subject = models.CharField(max_length=255, default="", blank=True)
    owner_id = models.CharField(max_length=255)
    is_closed = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inbox_conversations"
        ordering = ["conversation_id"]
        indexes = [
            models.Index(fields=["owner_id"], name="idx_conversation_owner"),
        ]

    def __str__(self) -> str:
        return f"{self.conversation_id} ({self.subject})"


class ConversationParticipant(models.Model):
    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name="participants",
        db_column="conversation_id",
    )
    participant_id = models.CharField(max_length=255)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "inbox_conversation_to_user"
        ordering = ["conversation_id", "participant_id", "id"]
        indexes = [
            models.Index(fields=["participant_id"], name="idx_conv_participant"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["conversation", "participant_id"],
                name="uq_conversation_participant",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.conversation_id}:{self.participant_id}"


class ConversationLabel(models.Model):
    label_id = models.BigAutoField(primary_key=True)
    owner_id = models.CharField(max_length=255)
    label = models.CharField(max_length=80)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "inbox_conversation_labels"
        ordering = ["owner_id", "label", "label_id"]
        indexes = [
            models.Index(fields=["owner_id"], name="idx_conv_label_owner"),
        ]

    def __str__(self) -> str:
        return f"{self.owner_id}:{self.label}"
