import os

# Must be set before alumni_connect.config.settings is imported
os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret-with-enough-bytes-for-hs256")
os.environ.setdefault("SERVICE_AUTH_ISSUER", "alumni-connect-auth")
os.environ.setdefault("SERVICE_AUTH_AUDIENCE", "alumni-connect")

import pytest
from fastapi.testclient import TestClient

from alumni_connect.application.commands.chat import SendMessageHandler
from alumni_connect.application.commands.conversations import ResolveConversationHandler
from alumni_connect.application.queries.chat import LoadMessagesHandler
from alumni_connect.application.queries.conversations import ListConversationsHandler
from alumni_connect.fastapi_app import create_fastapi_app
from alumni_connect.setup.ioc.container import create_container
from fakes import (
    ALICE,
    BOB,
    CAROL,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryProvider,
    InMemoryStore,
    make_token,
)


@pytest.fixture()
def store():
    """Store seeded with three members and no conversations."""
    store = InMemoryStore()
    store.add_profile(ALICE, "Alice Moreno")
    store.add_profile(BOB, "Bob Tran", degree="MBA")
    store.add_profile(CAROL, "Carol Ng", degree="BEng Mechanical")
    return store


@pytest.fixture()
def conversation_repo(store):
    return InMemoryConversationRepository(store)


@pytest.fixture()
def message_repo(store):
    return InMemoryMessageRepository(store)


@pytest.fixture()
def resolve_handler(conversation_repo):
    return ResolveConversationHandler(conversation_repo)


@pytest.fixture()
def list_handler(conversation_repo, message_repo):
    return ListConversationsHandler(conversation_repo, message_repo)


@pytest.fixture()
def load_handler(conversation_repo, message_repo):
    return LoadMessagesHandler(conv_repo=conversation_repo, msg_repo=message_repo)


@pytest.fixture()
def send_handler(conversation_repo, message_repo, load_handler):
    return SendMessageHandler(
        conv_repo=conversation_repo,
        msg_repo=message_repo,
        load_messages=load_handler,
    )


@pytest.fixture()
def app(store):
    """FastAPI app wired to the in-memory store."""
    return create_fastapi_app(create_container(InMemoryProvider(store)))


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers for Alice."""
    return {"Authorization": f"Bearer {make_token(ALICE)}"}
