from __future__ import annotations

import logging

import pytest

from inbox.clipboard import (
    PARAM_ACTION_NAME,
    PARAM_EXECUTOR_TYPE,
    PARAM_OBJECT_IDS,
    ActionDescriptorBuilder,
    ClipboardAction,
    UnsupportedAction,
    ValidatedSelection,
)
from inbox.context import ActorContext
from inbox.conversations import Conversation, InMemoryLabelProvider, Label


ACTOR = ActorContext(actor_id="user-a")
OTHER_OWNER = "user-b"
EXECUTOR = "tests.ConversationExecutor"


def _builder(label_count: int = 0) -> ActionDescriptorBuilder:
    labels = tuple(
        Label(label_id=index + 1, owner_id=ACTOR.actor_id, label=f"label-{index}")
        for index in range(label_count)
    )
    return ActionDescriptorBuilder(
        InMemoryLabelProvider(labels=labels),
        executor_type=EXECUTOR,
    )


def _selection(*conversations: Conversation) -> ValidatedSelection:
    return ValidatedSelection(conversations)


OWNED_OPEN = Conversation(conversation_id=1, owner_id=ACTOR.actor_id, is_closed=False)
OWNED_CLOSED = Conversation(conversation_id=2, owner_id=ACTOR.actor_id, is_closed=True)
FOREIGN_OPEN = Conversation(conversation_id=3, owner_id=OTHER_OWNER, is_closed=False)
FOREIGN_CLOSED = Conversation(conversation_id=4, owner_id=OTHER_OWNER, is_closed=True)


@pytest.mark.parametrize("action", list(ClipboardAction))
def test_empty_selection_returns_none_for_every_action(action):
    assert _builder(label_count=3).build(_selection(), action, ACTOR) is None


def test_empty_selection_returns_none_even_for_unknown_token():
    assert _builder().build(_selection(), "deleteForever", ACTOR) is None


def test_unknown_token_on_non_empty_selection_raises():
    with pytest.raises(UnsupportedAction) as excinfo:
        _builder().build(_selection(OWNED_OPEN), "deleteForever", ACTOR)

    assert excinfo.value.token == "deleteForever"


def test_unknown_token_is_logged_before_raising(caplog):
    caplog.set_level(logging.WARNING, logger="inbox.clipboard")

    with pytest.raises(UnsupportedAction):
        _builder().build(_selection(OWNED_OPEN), "archive", ACTOR)

    assert "archive" in caplog.text


class TestClose:
    def test_only_owned_open_conversations_are_closable(self):
        selection = _selection(OWNED_OPEN, OWNED_CLOSED, FOREIGN_OPEN, FOREIGN_CLOSED)

        descriptor = _builder().build(selection, "close", ACTOR)

        assert descriptor.name == "conversation.close"
        assert descriptor.object_ids == (1,)
        assert descriptor.parameters[PARAM_ACTION_NAME] == "close"
        assert descriptor.parameters[PARAM_EXECUTOR_TYPE] == EXECUTOR

    def test_owned_closed_conversation_excluded(self):
        assert _builder().build(_selection(OWNED_CLOSED), "close", ACTOR) is None

    def test_foreign_open_conversation_excluded(self):
        assert _builder().build(_selection(FOREIGN_OPEN), "close", ACTOR) is None


class TestOpen:
    def test_only_owned_closed_conversations_are_openable(self):
        selection = _selection(OWNED_OPEN, OWNED_CLOSED, FOREIGN_OPEN, FOREIGN_CLOSED)

        descriptor = _builder().build(selection, ClipboardAction.OPEN, ACTOR)

        assert descriptor.name == "conversation.open"
        assert descriptor.object_ids == (2,)
        assert descriptor.parameters[PARAM_ACTION_NAME] == "open"
        assert descriptor.parameters[PARAM_EXECUTOR_TYPE] == EXECUTOR

    def test_owned_open_conversation_excluded(self):
        assert _builder().build(_selection(OWNED_OPEN), "open", ACTOR) is None


class TestLeave:
    @pytest.mark.parametrize(
        ("token", "name"),
        [
            ("leave", "conversation.leave"),
            ("leavePermanently", "conversation.leavePermanently"),
        ],
    )
    def test_leave_covers_whole_selection(self, token, name):
        selection = _selection(FOREIGN_CLOSED, OWNED_OPEN, FOREIGN_OPEN)

        descriptor = _builder().build(selection, token, ACTOR)

        assert descriptor.name == name
        assert descriptor.object_ids == (4, 1, 3)
        assert set(descriptor.parameters) == {PARAM_OBJECT_IDS}


class TestAssignLabel:
    def test_actor_without_labels_gets_no_descriptor(self):
        assert _builder(label_count=0).build(_selection(OWNED_OPEN), "assignLabel", ACTOR) is None

    def test_actor_with_labels_gets_whole_selection(self):
        selection = _selection(OWNED_OPEN, FOREIGN_CLOSED)

        descriptor = _builder(label_count=1).build(selection, "assignLabel", ACTOR)

        assert descriptor.name == "conversation.assignLabel"
        assert descriptor.object_ids == (1, 4)
        assert set(descriptor.parameters) == {PARAM_OBJECT_IDS}

    def test_label_count_queried_once_per_build(self):
        provider = InMemoryLabelProvider(
            labels=(Label(label_id=1, owner_id=ACTOR.actor_id, label="work"),)
        )
        builder = ActionDescriptorBuilder(provider, executor_type=EXECUTOR)

        builder.build(_selection(OWNED_OPEN), "assignLabel", ACTOR)

        assert provider.lookup_count == 1

    def test_labels_of_other_users_do_not_count(self):
        provider = InMemoryLabelProvider(
            labels=(Label(label_id=1, owner_id=OTHER_OWNER, label="work"),)
        )
        builder = ActionDescriptorBuilder(provider, executor_type=EXECUTOR)

        assert builder.build(_selection(OWNED_OPEN), "assignLabel", ACTOR) is None


def test_state_actions_do_not_touch_label_store():
    provider = InMemoryLabelProvider()
    builder = ActionDescriptorBuilder(provider, executor_type=EXECUTOR)
    selection = _selection(OWNED_OPEN, OWNED_CLOSED)

    for token in ("close", "open", "leave", "leavePermanently"):
        builder.build(selection, token, ACTOR)

    assert provider.lookup_count == 0


def test_executor_type_defaults_to_django_setting(settings):
    settings.INBOX_CONVERSATION_EXECUTOR_TYPE = "configured.Executor"
    builder = ActionDescriptorBuilder(InMemoryLabelProvider())

    descriptor = builder.build(_selection(OWNED_OPEN), "close", ACTOR)

    assert descriptor.parameters[PARAM_EXECUTOR_TYPE] == "configured.Executor"


def test_closable_and_openable_ids_follow_selection_order():
    selection = _selection(OWNED_CLOSED, OWNED_OPEN, FOREIGN_OPEN)
    later = Conversation(conversation_id=5, owner_id=ACTOR.actor_id, is_closed=True)
    extended = _selection(*selection.values(), later)

    assert ActionDescriptorBuilder.closable_ids(selection, ACTOR) == (1,)
    assert ActionDescriptorBuilder.openable_ids(extended, ACTOR) == (2, 5)


@pytest.mark.parametrize("action", list(ClipboardAction))
def test_every_action_builds_a_descriptor_for_an_eligible_selection(action):
    selection = _selection(OWNED_OPEN, OWNED_CLOSED)

    descriptor = _builder(label_count=1).build(selection, action, ACTOR)

    assert descriptor.action is action
    assert descriptor.object_ids


def test_suppressed_close_is_logged_at_info(caplog):
    caplog.set_level(logging.INFO, logger="inbox.clipboard")

    assert _builder().build(_selection(OWNED_CLOSED, FOREIGN_OPEN), "close", ACTOR) is None

    records = [record for record in caplog.records if record.name == "inbox.clipboard"]
    assert [record.levelno for record in records] == [logging.INFO]
    assert "'close' suppressed" in records[0].getMessage()


def test_suppressed_assign_label_is_logged_at_info(caplog):
    caplog.set_level(logging.INFO, logger="inbox.clipboard")

    assert _builder(label_count=0).build(_selection(OWNED_OPEN), "assignLabel", ACTOR) is None

    assert "owns no labels" in caplog.text
