"""Fixtures for the HTTP application."""

import json

import pytest
from fastapi.testclient import TestClient

from api.dependencies.session import create_session_token
from infrastructure.services import (
    get_entity_storage,
    get_formatter_settings_store,
    get_membership_manager,
    get_settings,
    reset_providers,
)
from modules.og import SUBSCRIBE, SUBSCRIBE_WITHOUT_APPROVAL
from server.server import create_app


@pytest.fixture
def open_groups(monkeypatch):
    """Non-members of node.group may join without approval."""
    monkeypatch.setenv(
        "OG_ROLE_PERMISSIONS",
        json.dumps(
            {
                "node.group": {
                    "non-member": [SUBSCRIBE_WITHOUT_APPROVAL, SUBSCRIBE]
                }
            }
        ),
    )
    reset_providers()


@pytest.fixture
def client():
    return TestClient(create_app(), follow_redirects=False)


@pytest.fixture
def storage():
    return get_entity_storage()


@pytest.fixture
def memberships():
    return get_membership_manager()


@pytest.fixture
def formatter_store():
    return get_formatter_settings_store()


@pytest.fixture
def alice(storage):
    return storage.create_account("alice", email="alice@example.com")


@pytest.fixture
def bob(storage):
    return storage.create_account("bob", email="bob@example.com")


@pytest.fixture
def group(storage, alice):
    return storage.create_group("Hiking club", owner_id=alice.id)


@pytest.fixture
def login_as(client):
    def _login(account):
        client.cookies.set(
            get_settings().server.SESSION_COOKIE_NAME,
            create_session_token(account.id),
        )
        return client

    return _login


@pytest.fixture
def closed_groups(monkeypatch):
    """Nobody outside node.private may join it."""
    monkeypatch.setenv(
        "OG_ROLE_PERMISSIONS", json.dumps({"node.private": {"non-member": []}})
    )
    reset_providers()
