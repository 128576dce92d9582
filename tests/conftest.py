from typing import Optional

import pytest
from fastapi import Header
from fastapi.testclient import TestClient

from file_converter.actions.context import ActionContext
from file_converter.api.v1 import actions as actions_api
from file_converter.auth.supabase_auth import AuthUser, get_current_user, parse_bearer
from file_converter.db.engine import init_db, make_engine
from file_converter.main import app
from file_converter.storage.sql_store import SQLStore


@pytest.fixture
def store():
    engine = make_engine("sqlite://")
    init_db(engine)
    return SQLStore(engine)


@pytest.fixture
def alice(store):
    return ActionContext(store=store, user=AuthUser(id="alice"))


@pytest.fixture
def bob(store):
    return ActionContext(store=store, user=AuthUser(id="bob"))


@pytest.fixture
def anonymous(store):
    return ActionContext(store=store, user=None)


def _token_is_user_id(authorization: str = Header(None)) -> Optional[AuthUser]:
    token = parse_bearer(authorization)
    return AuthUser(id=token) if token else None


@pytest.fixture
def client(store):
    actions_api.set_store(store)
    app.dependency_overrides[get_current_user] = _token_is_user_id
    yield TestClient(app)
    app.dependency_overrides.clear()
    actions_api.set_store(None)
