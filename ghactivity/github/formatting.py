"""Render GitHub events as one-line summaries."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from ghactivity.logging import get_logger, log_warning

from .errors import PayloadDecodeError
from .models import (
    CreateEventPayload,
    EventKind,
    GitHubEvent,
    IssuesEventPayload,
)

logger = get_logger(__name__)

LINE_PREFIX = "- "

_PayloadT = typ.TypeVar("_PayloadT", CreateEventPayload, IssuesEventPayload)


def capitalize(text: str) -> str:
    """Uppercase the first character of ``text`` and leave the rest alone.

    Unlike :meth:`str.capitalize`, the remaining characters keep their case.

    >>> capitalize("reopened")
    'Reopened'
    >>> capitalize("")
    ''
    """
    if not text:
        return text
    return text[:1].upper() + text[1:]


def decode_payload(event: GitHubEvent, payload_type: type[_PayloadT]) -> _PayloadT:
    """Decode the raw payload of ``event`` as ``payload_type``.

    Raises
    ------
    PayloadDecodeError
        If the payload is not valid JSON or does not match ``payload_type``.

    """
    try:
        return msgspec.json.decode(event.payload, type=payload_type)
    except msgspec.DecodeError as exc:
        raise PayloadDecodeError.for_event(
            event_id=event.id,
            event_type=event.type,
            payload_type=payload_type.__name__,
            detail=str(exc),
        ) from exc


def _describe_push(event: GitHubEvent) -> str:
    return f"Pushed to {event.repo.name}"


def _describe_issues(event: GitHubEvent) -> str:
    payload = decode_payload(event, IssuesEventPayload)
    return f"{capitalize(payload.action)} an issue in {event.repo.name}"


def _describe_watch(event: GitHubEvent) -> str:
    return f"Starred {event.repo.name}"


def _describe_create(event: GitHubEvent) -> str:
    payload = decode_payload(event, CreateEventPayload)
    return f"Created a {payload.ref_type} in {event.repo.name}"


def _describe_fork(event: GitHubEvent) -> str:
    return f"Forked {event.repo.name}"


def _describe_pull_request(event: GitHubEvent) -> str:
    return f"Opened a pull request in {event.repo.name}"


def _describe_unknown(event: GitHubEvent) -> str:
    return f"{event.type} on {event.repo.name}"


_DESCRIBERS: dict[EventKind, cabc.Callable[[GitHubEvent], str]] = {
    EventKind.PUSH: _describe_push,
    EventKind.ISSUES: _describe_issues,
    EventKind.WATCH: _describe_watch,
    EventKind.CREATE: _describe_create,
    EventKind.FORK: _describe_fork,
    EventKind.PULL_REQUEST: _describe_pull_request,
    EventKind.UNKNOWN: _describe_unknown,
}


def describe_event(event: GitHubEvent) -> str:
    """Return the summary for ``event`` without the bullet prefix.

    Raises
    ------
    PayloadDecodeError
        If the event kind needs payload fields and the payload is malformed.

    """
    return _DESCRIBERS[event.kind](event)


def format_event_line(event: GitHubEvent) -> str:
    """Return ``event`` as a bullet line.

    A malformed payload only affects this line: the error message replaces the
    summary and a warning is logged.
    """
    try:
        description = describe_event(event)
    except PayloadDecodeError as exc:
        log_warning(
            logger,
            "Could not summarise %s %s: %s",
            event.type,
            event.id,
            exc,
        )
        description = str(exc)
    return f"{LINE_PREFIX}{description}"
