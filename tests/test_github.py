"""
Tests for the GitHub repository listing proxy.
"""

import httpx

from devconnector.api.dependencies import get_github_service
from devconnector.services.github_service import GithubService


REPOS = [{"id": 1, "name": "dotfiles"}, {"id": 2, "name": "devconnector"}]


def _use_transport(client, handler, token="secret-token"):
    service = GithubService(
        token=token,
        base_url="https://api.github.test",
        transport=httpx.MockTransport(handler),
    )
    client.app.dependency_overrides[get_github_service] = lambda: service


def test_relays_repositories(client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json=REPOS)

    _use_transport(client, handler)

    resp = client.get("/api/profile/github/janedev")

    assert resp.status_code == 200
    assert resp.json() == REPOS

    request = seen["request"]
    assert request.url.path == "/users/janedev/repos"
    assert request.url.params["per_page"] == "5"
    assert request.url.params["sort"] == "created"
    assert request.url.params["direction"] == "asc"
    assert request.headers["Authorization"] == "token secret-token"
    assert request.headers["User-Agent"] == "devconnector"


def test_no_authorization_header_without_token(client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json=[])

    _use_transport(client, handler, token=None)

    assert client.get("/api/profile/github/janedev").status_code == 200
    assert "Authorization" not in seen["request"].headers


def test_non_200_upstream_is_not_found(client):
    _use_transport(client, lambda request: httpx.Response(404, json={"message": "Not Found"}))

    resp = client.get("/api/profile/github/nobody-here")

    assert resp.status_code == 404
    assert resp.json() == {"msg": "No Github profile found"}


def test_rate_limited_upstream_is_not_found(client):
    _use_transport(client, lambda request: httpx.Response(403))

    resp = client.get("/api/profile/github/janedev")

    assert resp.status_code == 404
    assert resp.json() == {"msg": "No Github profile found"}


def test_transport_failure_is_generic_500(client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _use_transport(client, handler)

    resp = client.get("/api/profile/github/janedev")

    assert resp.status_code == 500
    assert resp.json() == {"msg": "Server Error"}
