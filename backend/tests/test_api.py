"""
Tests for the HTTP surface, wired to the in-memory store through Dishka.

Run with: pytest backend/tests/test_api.py -v
"""

import pytest

from alumni_connect.domain.exceptions import NotAuthenticatedError
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.presentation.dependencies.auth import decode_user
from fakes import ALICE, BOB, CAROL, make_token


def _headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


class TestAuthentication:
    def test_missing_token_is_401(self, client):
        response = client.get("/conversations")
        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}

    def test_garbage_token_is_401(self, client):
        response = client.get(
            "/conversations", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401

    def test_expired_token_is_rejected(self):
        with pytest.raises(NotAuthenticatedError, match="expired"):
            decode_user(make_token(ALICE, expires_in=-60))

    def test_subject_becomes_user_id(self):
        assert decode_user(make_token(BOB)).id == UserId(BOB)


class TestConversationsApi:
    def test_resolve_is_idempotent_per_pair(self, client, auth_headers, store):
        first = client.post(
            "/conversations/resolve", json={"other_user_id": BOB}, headers=auth_headers
        )
        second = client.post(
            "/conversations/resolve", json={"other_user_id": ALICE}, headers=_headers(BOB)
        )

        assert first.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert len(store.conversations) == 1

    def test_resolve_with_self_is_422(self, client, auth_headers):
        response = client.post(
            "/conversations/resolve", json={"other_user_id": ALICE}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_resolve_requires_other_user(self, client, auth_headers):
        response = client.post(
            "/conversations/resolve", json={"other_user_id": ""}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    def test_list_with_search(self, client, auth_headers, store):
        store.add_conversation(UserId(ALICE), UserId(BOB))
        store.add_conversation(UserId(ALICE), UserId(CAROL))

        everything = client.get("/conversations", headers=auth_headers).json()
        only_carol = client.get(
            "/conversations", params={"search": "carol"}, headers=auth_headers
        ).json()

        assert len(everything["conversations"]) == 2
        [conversation] = only_carol["conversations"]
        other = conversation["participants"][1]
        assert other["user_id"] == CAROL
        assert other["profile"]["initials"] == "CN"
        assert conversation["last_message"] is None

    def test_store_failure_is_503(self, client, auth_headers, store):
        store.add_conversation(UserId(ALICE), UserId(BOB))
        store.failing.add("load conversation participants")

        response = client.get("/conversations", headers=auth_headers)

        assert response.status_code == 503
        assert response.json() == {
            "error": "Could not load conversation participants. Please try again."
        }


class TestMessagesApi:
    def test_send_then_load_round_trip(self, client, auth_headers, store):
        conversation_id = client.post(
            "/conversations/resolve", json={"other_user_id": BOB}, headers=auth_headers
        ).json()["id"]

        sent = client.post(
            f"/conversations/{conversation_id}/messages",
            json={"content": "Hi Bob!"},
            headers=auth_headers,
        )
        loaded = client.get(
            f"/conversations/{conversation_id}/messages", headers=_headers(BOB)
        )

        assert sent.status_code == 200
        assert sent.json()["sent"] is True
        assert [m["content"] for m in sent.json()["messages"]] == ["Hi Bob!"]
        assert loaded.json()["conversation_id"] == conversation_id
        [message] = loaded.json()["messages"]
        assert message["sender_id"] == ALICE
        assert message["sender"]["full_name"] == "Alice Moreno"

    def test_blank_message_is_not_sent(self, client, auth_headers, store):
        conversation_id = store.add_conversation(UserId(ALICE), UserId(BOB))

        response = client.post(
            f"/conversations/{conversation_id}/messages",
            json={"content": "   "},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"sent": False, "messages": None}
        assert store.messages == []

    def test_over_length_message_is_not_sent(self, client, auth_headers, store):
        conversation_id = store.add_conversation(UserId(ALICE), UserId(BOB))

        response = client.post(
            f"/conversations/{conversation_id}/messages",
            json={"content": "x" * 2001},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"sent": False, "messages": None}
        assert store.messages == []

    def test_message_at_length_cap_is_sent(self, client, auth_headers, store):
        conversation_id = store.add_conversation(UserId(ALICE), UserId(BOB))

        response = client.post(
            f"/conversations/{conversation_id}/messages",
            json={"content": "x" * 2000},
            headers=auth_headers,
        )

        assert response.json()["sent"] is True
        assert len(store.messages) == 1

    def test_outsider_is_403(self, client, store):
        conversation_id = store.add_conversation(UserId(ALICE), UserId(BOB))

        load = client.get(
            f"/conversations/{conversation_id}/messages", headers=_headers(CAROL)
        )
        send = client.post(
            f"/conversations/{conversation_id}/messages",
            json={"content": "hello"},
            headers=_headers(CAROL),
        )

        assert load.status_code == 403
        assert send.status_code == 403

    def test_malformed_conversation_id_is_404(self, client, auth_headers):
        response = client.get("/conversations/not-a-uuid/messages", headers=auth_headers)
        assert response.status_code == 404

    def test_unknown_conversation_send_is_404(self, client, auth_headers):
        response = client.post(
            "/conversations/00000000-0000-4000-8000-000000000000/messages",
            json={"content": "hello"},
            headers=auth_headers,
        )
        assert response.status_code == 404


class TestServiceEndpoints:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_metrics_exposes_messaging_counters(self, client, auth_headers, store):
        conversation_id = store.add_conversation(UserId(ALICE), UserId(BOB))
        client.post(
            f"/conversations/{conversation_id}/messages",
            json={"content": "hello"},
            headers=auth_headers,
        )

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "messaging_messages_total" in response.text

    def test_unmatched_paths_share_one_latency_label(self, client):
        for i in range(3):
            assert client.get(f"/no-such-path-{i}").status_code == 404

        metrics = client.get("/metrics").text

        assert 'route="unmatched"' in metrics
        assert "/no-such-path-" not in metrics

    def test_matched_routes_use_the_path_template(self, client, auth_headers):
        client.get(
            "/conversations/00000000-0000-4000-8000-000000000000/messages",
            headers=auth_headers,
        )

        metrics = client.get("/metrics").text

        assert 'route="/conversations/{conversation_id}/messages"' in metrics

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"
