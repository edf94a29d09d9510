"""Unit tests for the GitHub events client."""

from __future__ import annotations

import pytest

from ghactivity.github import (
    EventDecodeError,
    GitHubEventsClient,
    GitHubEventsConfig,
    NetworkError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from tests.helpers.github_events import (
    RawEventSpec,
    encode_events,
    make_failing_http_client,
    make_http_client,
    make_raw_event,
)

_HTTP_NOT_FOUND = 404
_HTTP_SERVER_ERROR = 500
_HTTP_FORBIDDEN = 403


def test_fetch_events_requests_user_events_endpoint() -> None:
    """The username is substituted into the events URL."""
    http_client, recorded = make_http_client(200)
    client = GitHubEventsClient(http_client=http_client)

    client.fetch_events("octocat")

    assert len(recorded.requests) == 1
    request = recorded.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://api.github.com/users/octocat/events"
    assert request.headers["User-Agent"] == "gh-activity/0.1"
    assert request.headers["Accept"] == "application/vnd.github+json"


def test_fetch_events_uses_configured_endpoint() -> None:
    """A custom endpoint template and user agent are honoured."""
    http_client, recorded = make_http_client(200)
    config = GitHubEventsConfig(
        endpoint_template="https://ghe.example.test/api/v3/users/{username}/events",
        user_agent="tests/1.0",
    )
    client = GitHubEventsClient(config, http_client=http_client)

    client.fetch_events("hubot")

    request = recorded.requests[0]
    assert str(request.url) == "https://ghe.example.test/api/v3/users/hubot/events"
    assert request.headers["User-Agent"] == "tests/1.0"


def test_events_url_encodes_username_as_one_segment() -> None:
    """Path separators in a username cannot escape the users segment."""
    url = GitHubEventsConfig().events_url("a/b")

    assert url == "https://api.github.com/users/a%2Fb/events"


def test_fetch_events_decodes_events_in_order() -> None:
    """Events are returned in response order with their fields decoded."""
    body = encode_events(
        [
            make_raw_event(RawEventSpec(event_type="PushEvent", event_id="2")),
            make_raw_event(
                RawEventSpec(
                    event_type="WatchEvent", event_id="1", repo_name="octo/other"
                )
            ),
        ]
    )
    http_client, _ = make_http_client(200, body)
    client = GitHubEventsClient(http_client=http_client)

    events = client.fetch_events("octocat")

    assert [event.id for event in events] == ["2", "1"]
    assert events[0].type == "PushEvent"
    assert events[0].actor.login == "octocat"
    assert events[1].repo.name == "octo/other"
    assert events[0].public is True
    assert events[0].created_at is not None
    assert events[0].created_at.year == 2024


def test_fetch_events_returns_empty_list_for_empty_feed() -> None:
    """An empty JSON array yields no events."""
    http_client, _ = make_http_client(200, b"[]")
    client = GitHubEventsClient(http_client=http_client)

    assert client.fetch_events("octocat") == []


def test_fetch_events_raises_not_found_with_username() -> None:
    """A 404 response identifies the missing user."""
    http_client, _ = make_http_client(_HTTP_NOT_FOUND, b'{"message": "Not Found"}')
    client = GitHubEventsClient(http_client=http_client)

    with pytest.raises(UserNotFoundError) as excinfo:
        client.fetch_events("ghost-user")

    assert excinfo.value.username == "ghost-user"
    assert excinfo.value.status_code == _HTTP_NOT_FOUND
    assert str(excinfo.value) == 'user "ghost-user" not found'


@pytest.mark.parametrize("status_code", [_HTTP_SERVER_ERROR, _HTTP_FORBIDDEN, 201])
def test_fetch_events_raises_unexpected_status(status_code: int) -> None:
    """Any status other than 200 and 404 is reported with its code."""
    http_client, _ = make_http_client(status_code, b"[]")
    client = GitHubEventsClient(http_client=http_client)

    with pytest.raises(UnexpectedStatusError) as excinfo:
        client.fetch_events("octocat")

    assert excinfo.value.status_code == status_code
    assert str(excinfo.value) == f"unexpected status code: {status_code}"


def test_fetch_events_wraps_transport_failures() -> None:
    """Connection failures surface as NetworkError."""
    client = GitHubEventsClient(http_client=make_failing_http_client())

    with pytest.raises(NetworkError) as excinfo:
        client.fetch_events("octocat")

    assert excinfo.value.url == "https://api.github.com/users/octocat/events"
    assert "connection refused" in str(excinfo.value)


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b'{"message": "object instead of list"}',
        b'[{"id": "1", "type": "PushEvent", "repo": "octo/hello"}]',
    ],
)
def test_fetch_events_raises_decode_error_for_malformed_body(body: bytes) -> None:
    """Bodies that are not a list of events raise EventDecodeError."""
    http_client, _ = make_http_client(200, body)
    client = GitHubEventsClient(http_client=http_client)

    with pytest.raises(EventDecodeError):
        client.fetch_events("octocat")


@pytest.mark.parametrize("username", ["", "   "])
def test_fetch_events_rejects_blank_username(username: str) -> None:
    """Blank usernames are rejected before any request is sent."""
    http_client, recorded = make_http_client(200)
    client = GitHubEventsClient(http_client=http_client)

    with pytest.raises(ValueError, match="non-empty"):
        client.fetch_events(username)

    assert recorded.requests == []


def test_close_leaves_injected_http_client_open() -> None:
    """Injected HTTP clients are owned by the caller."""
    http_client, _ = make_http_client(200)

    with GitHubEventsClient(http_client=http_client):
        pass

    assert not http_client.is_closed


def test_close_closes_owned_http_client() -> None:
    """A client created internally is closed with the events client."""
    client = GitHubEventsClient()

    client.close()

    assert client._client.is_closed  # noqa: SLF001 - ownership check
