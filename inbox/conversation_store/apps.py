"""
Inbox Conversation Store - App Configuration
============================================
Persistent conversations, participants, and per-user labels.
"""

from django.apps import AppConfig


class InboxConversationStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "inbox.conversation_store"
    label = "inbox_conversation_store"
    verbose_name = "Inbox Conversation Store"
