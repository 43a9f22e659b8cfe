"""
Inbox - Conversation Messaging Core
===================================
Authorization and descriptor assembly for bulk conversation actions.
"""
