"""
Inbox - Django Settings
=======================
Django serves as the framework container for the conversation store.
The clipboard core reads only INBOX_* keys and works without a database.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "INBOX_SECRET_KEY",
    "inbox-dev-key-replace-before-deployment",
)

DEBUG = os.environ.get("INBOX_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # ── Inbox Modules ─────────────────────────────────────────
    "inbox.conversation_store.apps.InboxConversationStoreConfig",
]

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Clipboard ─────────────────────────────────────────────────
# Executor token placed on close/open descriptors.
INBOX_CONVERSATION_EXECUTOR_TYPE = "inbox.conversations.ConversationAction"

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "inbox": {
            "handlers": ["console"],
            "level": os.environ.get("INBOX_LOG_LEVEL", "INFO"),
        },
    },
}
