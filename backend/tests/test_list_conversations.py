"""
Tests for assembling a member's conversation list.

Run with: pytest backend/tests/test_list_conversations.py -v
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from prometheus_client import REGISTRY

from alumni_connect.application.queries.conversations import ListConversationsQuery
from alumni_connect.domain.exceptions import QueryFailureError
from alumni_connect.domain.value_objects.user_id import UserId
from fakes import ALICE, BOB, CAROL

T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
LIST_LOGGER = "alumni_connect.application.queries.conversations.list_conversations"


@pytest.mark.asyncio
async def test_user_without_conversations_gets_empty_list(list_handler):
    result = await list_handler.execute(ListConversationsQuery(user_id=UserId(ALICE)))
    assert result == []


@pytest.mark.asyncio
async def test_sorted_by_latest_activity_with_newest_message_as_preview(
    store, list_handler
):
    alice, bob, carol = UserId(ALICE), UserId(BOB), UserId(CAROL)
    with_bob = store.add_conversation(alice, bob)
    with_carol = store.add_conversation(alice, carol)
    store.add_message(with_bob, alice, "hi bob", T0)
    store.add_message(with_carol, carol, "hi alice", T0 + timedelta(minutes=5))
    store.add_message(with_bob, bob, "hey, long time", T0 + timedelta(minutes=10))

    result = await list_handler.execute(ListConversationsQuery(user_id=alice))

    assert [c.id for c in result] == [with_bob, with_carol]
    assert result[0].last_message.content == "hey, long time"
    assert result[0].updated_at == T0 + timedelta(minutes=10)
    assert result[1].last_message.content == "hi alice"


@pytest.mark.asyncio
async def test_participants_are_self_then_other(store, list_handler):
    alice, bob = UserId(ALICE), UserId(BOB)
    store.add_conversation(bob, alice)

    [conversation] = await list_handler.execute(ListConversationsQuery(user_id=alice))

    assert [p.user_id for p in conversation.participants] == [alice, bob]
    assert conversation.other_participant(alice).profile.full_name == "Bob Tran"


@pytest.mark.asyncio
async def test_never_lists_conversations_user_is_not_in(store, list_handler):
    alice, bob, carol = UserId(ALICE), UserId(BOB), UserId(CAROL)
    mine = store.add_conversation(alice, bob)
    store.add_conversation(bob, carol)

    result = await list_handler.execute(ListConversationsQuery(user_id=alice))

    assert [c.id for c in result] == [mine]
    assert all(c.involves(alice) for c in result)


@pytest.mark.asyncio
async def test_conversation_with_missing_profile_is_dropped(store, list_handler):
    alice, bob = UserId(ALICE), UserId(BOB)
    ghost = UserId("user-without-profile")
    kept = store.add_conversation(alice, bob)
    store.add_conversation(alice, ghost)
    store.add_conversation(alice)  # only one participant

    result = await list_handler.execute(ListConversationsQuery(user_id=alice))

    assert [c.id for c in result] == [kept]


@pytest.mark.asyncio
async def test_empty_conversation_is_kept_and_counts_as_recent(store, list_handler):
    alice, bob, carol = UserId(ALICE), UserId(BOB), UserId(CAROL)
    old = store.add_conversation(alice, bob)
    store.add_message(old, bob, "old news", T0)
    fresh = store.add_conversation(alice, carol)

    result = await list_handler.execute(ListConversationsQuery(user_id=alice))

    assert [c.id for c in result] == [fresh, old]
    assert result[0].last_message is None
    assert result[0].updated_at > T0


@pytest.mark.asyncio
async def test_search_filters_by_other_participant_name(store, list_handler):
    alice, bob, carol = UserId(ALICE), UserId(BOB), UserId(CAROL)
    store.add_conversation(alice, bob)
    with_carol = store.add_conversation(alice, carol)

    result = await list_handler.execute(
        ListConversationsQuery(user_id=alice, search="CAROL")
    )

    assert [c.id for c in result] == [with_carol]


@pytest.mark.asyncio
async def test_search_term_is_matched_as_typed(store, list_handler):
    alice, carol = UserId(ALICE), UserId(CAROL)
    store.add_conversation(alice, carol)

    padded = await list_handler.execute(
        ListConversationsQuery(user_id=alice, search="  carol ")
    )
    inner = await list_handler.execute(
        ListConversationsQuery(user_id=alice, search="ol n")
    )

    assert padded == []
    assert len(inner) == 1


@pytest.mark.asyncio
async def test_dropped_conversation_is_logged_and_counted(store, list_handler, caplog):
    alice, bob = UserId(ALICE), UserId(BOB)
    store.add_conversation(alice, bob)
    orphaned = store.add_conversation(alice, UserId("user-without-profile"))
    before = REGISTRY.get_sample_value("messaging_dropped_conversations_total") or 0.0

    with caplog.at_level(logging.WARNING, logger=LIST_LOGGER):
        result = await list_handler.execute(ListConversationsQuery(user_id=alice))

    assert len(result) == 1
    warnings = [r for r in caplog.records if r.name == LIST_LOGGER]
    assert [r.levelno for r in warnings] == [logging.WARNING]
    assert str(orphaned) in warnings[0].getMessage()
    after = REGISTRY.get_sample_value("messaging_dropped_conversations_total")
    assert after == before + 1


@pytest.mark.asyncio
async def test_store_failure_aborts_whole_load(store, list_handler):
    alice, bob = UserId(ALICE), UserId(BOB)
    store.add_conversation(alice, bob)
    store.failing.add("load conversation participants")

    with pytest.raises(QueryFailureError):
        await list_handler.execute(ListConversationsQuery(user_id=alice))
