"""
Pytest fixtures for DevConnector tests.

The application runs against an in-memory MongoDB (mongomock-motor) handed
to create_app, so no database server is needed.
"""

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from devconnector.base import create_app
from devconnector.models import User


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_app(mongo_client=AsyncMongoMockClient())
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def run(client) -> Callable:
    """Run a coroutine function on the app's event loop and return its result."""

    def _run(fn, *args):
        return client.portal.call(fn, *args)

    return _run


@pytest.fixture
def make_user(run) -> Callable[..., User]:
    def _make_user(name: str = "Jane Dev", avatar: str = "//www.gravatar.com/avatar/abc") -> User:
        email = f"{name.split()[0].lower()}@example.com"
        user = User(name=name, email=email, avatar=avatar)
        run(user.insert)
        return user

    return _make_user


@pytest.fixture
def auth_headers() -> Callable[[User], dict]:
    def _auth_headers(user: User) -> dict:
        return {"x-auth-token": user.generate_jwt()}

    return _auth_headers


@pytest.fixture
def profile_payload() -> dict:
    return {
        "status": "Developer",
        "skills": "Python, FastAPI, MongoDB",
        "company": "Acme",
        "website": "acme.dev",
        "twitter": "twitter.com/jane",
        "youtube": "",
    }
