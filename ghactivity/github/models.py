"""Typed records for the GitHub public events feed.

Events are decoded with msgspec. Fields the feed adds that are not listed here
are ignored, and every field has a zero-value default so partial records still
decode. The type-specific ``payload`` is kept as raw JSON until a formatter
asks for it.
"""

from __future__ import annotations

import datetime as dt
import enum

import msgspec

_EMPTY_OBJECT = msgspec.Raw(b"{}")
_NULL = msgspec.Raw(b"null")


class EventKind(enum.StrEnum):
    """Closed set of event types that get a dedicated summary."""

    PUSH = "PushEvent"
    ISSUES = "IssuesEvent"
    WATCH = "WatchEvent"
    CREATE = "CreateEvent"
    FORK = "ForkEvent"
    PULL_REQUEST = "PullRequestEvent"
    UNKNOWN = "unknown"

    @classmethod
    def from_type(cls, raw: str) -> EventKind:
        """Return the kind for a raw discriminator, or ``UNKNOWN``."""
        try:
            kind = cls(raw)
        except ValueError:
            return cls.UNKNOWN
        # "unknown" on the wire is just another unrecognised type.
        return cls.UNKNOWN if kind is cls.UNKNOWN else kind


class Actor(msgspec.Struct, frozen=True, kw_only=True):
    """User who performed an event.

    Attributes
    ----------
    id : int
        Numeric GitHub user id.
    login : str
        Account login.
    display_login : str
        Login as GitHub chooses to display it.
    gravatar_id : str
        Legacy gravatar identifier, usually empty.
    url : str
        API URL of the user.
    avatar_url : str
        Avatar image URL.

    """

    id: int = 0
    login: str = ""
    display_login: str = ""
    gravatar_id: str = ""
    url: str = ""
    avatar_url: str = ""


class Repo(msgspec.Struct, frozen=True, kw_only=True):
    """Repository an event happened on."""

    id: int = 0
    name: str = ""
    url: str = ""


class GitHubEvent(msgspec.Struct, frozen=True, kw_only=True):
    """One record from ``/users/{username}/events``.

    Attributes
    ----------
    id : str
        Event identifier.
    type : str
        Raw type discriminator such as ``"PushEvent"``. Kept as a string so
        unrecognised types still decode; see :attr:`kind`.
    actor : Actor
        User who performed the event.
    repo : Repo
        Repository the event happened on.
    payload : msgspec.Raw
        Type-dependent sub-document, undecoded.
    public : bool
        Whether the event is public.
    created_at : datetime.datetime | None
        When GitHub recorded the event.

    """

    id: str = ""
    type: str = ""
    actor: Actor = msgspec.field(default_factory=Actor)
    repo: Repo = msgspec.field(default_factory=Repo)
    payload: msgspec.Raw = _EMPTY_OBJECT
    public: bool = False
    created_at: dt.datetime | None = None

    @property
    def kind(self) -> EventKind:
        """Return the closed event kind for :attr:`type`."""
        return EventKind.from_type(self.type)


class CreateEventPayload(msgspec.Struct, frozen=True, kw_only=True):
    """Payload of a ``CreateEvent`` (branch, tag or repository created)."""

    ref: str | None = None
    ref_type: str = ""
    full_ref: str | None = None
    master_branch: str = ""
    description: str | None = None
    pusher_type: str = ""


class IssuesEventPayload(msgspec.Struct, frozen=True, kw_only=True):
    """Payload of an ``IssuesEvent``.

    Only ``action`` is read. The nested issue, assignee and label documents
    are preserved verbatim as raw JSON.
    """

    action: str = ""
    issue: msgspec.Raw = _NULL
    assignee: msgspec.Raw = _NULL
    assignees: list[msgspec.Raw] = msgspec.field(default_factory=list)
    label: msgspec.Raw = _NULL
    labels: list[msgspec.Raw] = msgspec.field(default_factory=list)

