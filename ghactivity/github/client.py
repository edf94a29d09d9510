"""Blocking client for the GitHub public user events endpoint."""

from __future__ import annotations

import dataclasses
import typing as typ
from urllib.parse import quote

import httpx
import msgspec

from ghactivity.logging import get_logger, log_debug, log_info, log_warning

from .errors import (
    EventDecodeError,
    NetworkError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from .models import GitHubEvent

if typ.TYPE_CHECKING:
    import types

logger = get_logger(__name__)

_DEFAULT_ENDPOINT_TEMPLATE = "https://api.github.com/users/{username}/events"
_DEFAULT_USER_AGENT = "gh-activity/0.1"
_HTTP_OK = 200
_HTTP_NOT_FOUND = 404

_events_decoder = msgspec.json.Decoder(list[GitHubEvent])


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubEventsConfig:
    """Configuration for :class:`GitHubEventsClient`.

    Attributes
    ----------
    endpoint_template
        URL with a ``{username}`` placeholder.
    user_agent
        Value sent as ``User-Agent``; GitHub rejects requests without one.

    """

    endpoint_template: str = _DEFAULT_ENDPOINT_TEMPLATE
    user_agent: str = _DEFAULT_USER_AGENT

    def events_url(self, username: str) -> str:
        """Return the events URL for ``username``.

        The username is percent-encoded as a single path segment.
        """
        return self.endpoint_template.format(username=quote(username, safe=""))


def _require_username(username: str) -> str:
    stripped = username.strip()
    if not stripped:
        msg = "username must be non-empty"
        raise ValueError(msg)
    return stripped


def decode_events(body: bytes) -> list[GitHubEvent]:
    """Decode an events response body.

    Raises
    ------
    EventDecodeError
        If the body is not valid JSON or not a list of event objects.

    """
    try:
        return _events_decoder.decode(body)
    except msgspec.DecodeError as exc:
        raise EventDecodeError.malformed(str(exc)) from exc


class GitHubEventsClient:
    """Fetch a user's recent public events over the REST API."""

    def __init__(
        self,
        config: GitHubEventsConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client, creating an HTTP client unless one is given."""
        self._config = config or GitHubEventsConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client()
        self._headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._config.user_agent,
        }

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubEventsClient:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources when leaving a ``with`` block."""
        self.close()

    def fetch_events(self, username: str) -> list[GitHubEvent]:
        """Return the recent public events for ``username`` in API order.

        Parameters
        ----------
        username
            GitHub login whose feed is requested.

        Returns
        -------
        list[GitHubEvent]
            Decoded events, possibly empty.

        Raises
        ------
        ValueError
            If ``username`` is empty or blank.
        NetworkError
            If the request fails before a response arrives.
        UserNotFoundError
            If GitHub answers 404.
        UnexpectedStatusError
            If GitHub answers with any other non-200 status.
        EventDecodeError
            If the response body cannot be decoded.

        """
        username = _require_username(username)
        url = self._config.events_url(username)
        log_info(logger, "Fetching events for %s from %s", username, url)

        try:
            response = self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            log_warning(logger, "Request to %s failed: %s", url, exc)
            raise NetworkError.transport_failure(url, exc) from exc

        if response.status_code == _HTTP_NOT_FOUND:
            log_warning(logger, "GitHub user %s not found", username)
            raise UserNotFoundError.for_username(username)
        if response.status_code != _HTTP_OK:
            log_warning(
                logger,
                "Unexpected HTTP %d fetching events for %s",
                response.status_code,
                username,
            )
            raise UnexpectedStatusError.http_status(response.status_code)

        events = decode_events(response.content)
        log_debug(logger, "Decoded %d events for %s", len(events), username)
        return events
