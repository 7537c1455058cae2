"""
Tests for loading a thread and sending messages.

Run with: pytest backend/tests/test_messages.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from alumni_connect.application.commands.chat import SendMessageCommand
from alumni_connect.application.queries.chat import LoadMessagesQuery
from alumni_connect.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    QueryFailureError,
)
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from fakes import ALICE, BOB, CAROL

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def conversation(store):
    return store.add_conversation(UserId(ALICE), UserId(BOB))


def _send(conversation_id: ConversationId, content: str, sender: str = ALICE):
    return SendMessageCommand(
        conversation_id=conversation_id, sender_id=UserId(sender), content=content
    )


class TestLoadMessages:
    @pytest.mark.asyncio
    async def test_thread_is_ordered_by_timestamp_not_insertion(
        self, store, conversation, load_handler
    ):
        alice, bob = UserId(ALICE), UserId(BOB)
        store.add_message(conversation, alice, "M1", T0)
        store.add_message(conversation, alice, "M3", T0 + timedelta(minutes=3))
        store.add_message(conversation, bob, "M2", T0 + timedelta(minutes=2))

        messages = await load_handler.execute(
            LoadMessagesQuery(conversation_id=conversation)
        )

        assert [m.content for m in messages] == ["M1", "M2", "M3"]

    @pytest.mark.asyncio
    async def test_messages_carry_sender_profile(self, store, conversation, load_handler):
        store.add_message(conversation, UserId(BOB), "hello", T0)

        [message] = await load_handler.execute(
            LoadMessagesQuery(conversation_id=conversation)
        )

        assert message.sender.full_name == "Bob Tran"
        assert message.sender.initials == "BT"

    @pytest.mark.asyncio
    async def test_only_messages_of_requested_conversation(
        self, store, conversation, load_handler
    ):
        other = store.add_conversation(UserId(ALICE), UserId(CAROL))
        store.add_message(other, UserId(CAROL), "not for bob", T0)

        messages = await load_handler.execute(
            LoadMessagesQuery(conversation_id=conversation)
        )

        assert messages == []

    @pytest.mark.asyncio
    async def test_viewer_outside_conversation_is_denied(self, conversation, load_handler):
        with pytest.raises(AccessDeniedError):
            await load_handler.execute(
                LoadMessagesQuery(conversation_id=conversation, viewer_id=UserId(CAROL))
            )

    @pytest.mark.asyncio
    async def test_participant_viewer_is_allowed(self, store, conversation, load_handler):
        store.add_message(conversation, UserId(ALICE), "hi", T0)

        messages = await load_handler.execute(
            LoadMessagesQuery(conversation_id=conversation, viewer_id=UserId(BOB))
        )

        assert len(messages) == 1


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_sent_message_is_at_tail_of_reloaded_thread(
        self, store, conversation, send_handler
    ):
        store.add_message(conversation, UserId(BOB), "earlier", T0)

        result = await send_handler.execute(_send(conversation, "Hi Bob!"))

        assert result.sent is True
        assert [m.content for m in result.thread] == ["earlier", "Hi Bob!"]
        assert result.thread[-1].id == result.message.id
        assert result.thread[-1].sender.full_name == "Alice Moreno"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t "])
    async def test_blank_content_is_a_no_op(self, store, conversation, send_handler, content):
        result = await send_handler.execute(_send(conversation, content))

        assert result.sent is False
        assert result.thread == []
        assert store.messages == []

    @pytest.mark.asyncio
    async def test_over_cap_content_is_a_no_op(self, store, conversation, send_handler):
        result = await send_handler.execute(_send(conversation, "x" * 2001))

        assert result.sent is False
        assert store.messages == []

    @pytest.mark.asyncio
    async def test_content_at_cap_is_sent(self, store, conversation, send_handler):
        result = await send_handler.execute(_send(conversation, "x" * 2000))

        assert result.sent is True
        assert len(store.messages) == 1

    @pytest.mark.asyncio
    async def test_rejected_content_never_touches_store(
        self, store, conversation, send_handler
    ):
        store.failing.update({"send your message", "load conversation participants"})

        result = await send_handler.execute(_send(conversation, "   "))

        assert result.sent is False

    @pytest.mark.asyncio
    async def test_sender_outside_conversation_is_denied(
        self, store, conversation, send_handler
    ):
        with pytest.raises(AccessDeniedError):
            await send_handler.execute(_send(conversation, "let me in", sender=CAROL))
        assert store.messages == []

    @pytest.mark.asyncio
    async def test_unknown_conversation_is_not_found(self, send_handler):
        unknown = ConversationId("00000000-0000-4000-8000-000000000000")
        with pytest.raises(EntityNotFoundError):
            await send_handler.execute(_send(unknown, "anyone?"))

    @pytest.mark.asyncio
    async def test_insert_failure_propagates_without_reload(
        self, store, conversation, send_handler
    ):
        store.failing.add("send your message")

        with pytest.raises(QueryFailureError):
            await send_handler.execute(_send(conversation, "hello"))
        assert store.messages == []
