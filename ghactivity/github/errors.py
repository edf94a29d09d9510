"""Errors raised while fetching and rendering GitHub activity."""

from __future__ import annotations

_HTTP_NOT_FOUND = 404


class GitHubActivityError(RuntimeError):
    """Base class for every gh-activity failure.

    This provides a single catch point for the command-line entry point.
    """


class NetworkError(GitHubActivityError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str, *, url: str) -> None:
        """Initialise with a message and the URL that was requested."""
        self.url = url
        super().__init__(message)

    @classmethod
    def transport_failure(cls, url: str, cause: BaseException) -> NetworkError:
        """Return an error for a failed connection, DNS lookup or similar."""
        return cls(f"request to {url} failed: {cause}", url=url)


class UserNotFoundError(GitHubActivityError):
    """Raised when GitHub answers 404 for the requested username."""

    def __init__(self, message: str, *, username: str) -> None:
        """Initialise with a message and the username that was not found."""
        self.username = username
        self.status_code = _HTTP_NOT_FOUND
        super().__init__(message)

    @classmethod
    def for_username(cls, username: str) -> UserNotFoundError:
        """Return an error naming the missing user."""
        return cls(f'user "{username}" not found', username=username)


class UnexpectedStatusError(GitHubActivityError):
    """Raised when GitHub answers with a status other than 200 or 404."""

    def __init__(self, message: str, *, status_code: int) -> None:
        """Initialise with a message and the HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_status(cls, status_code: int) -> UnexpectedStatusError:
        """Return an error for an unexpected HTTP status."""
        return cls(f"unexpected status code: {status_code}", status_code=status_code)


class EventDecodeError(GitHubActivityError):
    """Raised when the events response body is not a list of events."""

    @classmethod
    def malformed(cls, detail: str) -> EventDecodeError:
        """Return an error wrapping the decoder's message."""
        return cls(f"could not decode events response: {detail}")


class PayloadDecodeError(GitHubActivityError):
    """Raised when an event's type-specific payload cannot be decoded.

    Attributes
    ----------
    event_id
        Identifier of the event whose payload failed.
    event_type
        Raw type discriminator of the event.
    payload_type
        Name of the payload structure the decoder expected.

    """

    def __init__(
        self,
        message: str,
        *,
        event_id: str,
        event_type: str,
        payload_type: str,
    ) -> None:
        """Initialise with a message and the offending event's identity."""
        self.event_id = event_id
        self.event_type = event_type
        self.payload_type = payload_type
        super().__init__(message)

    @classmethod
    def for_event(
        cls,
        *,
        event_id: str,
        event_type: str,
        payload_type: str,
        detail: str,
    ) -> PayloadDecodeError:
        """Return an error describing which payload failed and why."""
        return cls(
            f"error parsing {payload_type} payload: {detail}",
            event_id=event_id,
            event_type=event_type,
            payload_type=payload_type,
        )
