"""GitHub events client, models and formatting."""

from __future__ import annotations

from .activity import ActivityFeed
from .client import GitHubEventsClient, GitHubEventsConfig, decode_events
from .errors import (
    EventDecodeError,
    GitHubActivityError,
    NetworkError,
    PayloadDecodeError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from .formatting import capitalize, describe_event, format_event_line
from .models import (
    Actor,
    CreateEventPayload,
    EventKind,
    GitHubEvent,
    IssuesEventPayload,
    Repo,
)

__all__ = [
    "ActivityFeed",
    "Actor",
    "CreateEventPayload",
    "EventDecodeError",
    "EventKind",
    "GitHubActivityError",
    "GitHubEvent",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "IssuesEventPayload",
    "NetworkError",
    "PayloadDecodeError",
    "Repo",
    "UnexpectedStatusError",
    "UserNotFoundError",
    "capitalize",
    "decode_events",
    "describe_event",
    "format_event_line",
]
