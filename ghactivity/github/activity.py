"""A user's fetched activity feed and its rendering."""

from __future__ import annotations

import dataclasses
import typing as typ

from .formatting import format_event_line

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .client import GitHubEventsClient
    from .models import GitHubEvent


@dataclasses.dataclass(frozen=True, slots=True)
class ActivityFeed:
    """Events fetched for one user, kept in API response order."""

    username: str
    events: tuple[GitHubEvent, ...]

    @classmethod
    def fetch(cls, client: GitHubEventsClient, username: str) -> ActivityFeed:
        """Fetch the feed for ``username`` with a single request."""
        return cls(username=username, events=tuple(client.fetch_events(username)))

    def lines(self) -> cabc.Iterator[str]:
        """Yield one formatted line per event."""
        for event in self.events:
            yield format_event_line(event)

    def display(self, stream: typ.TextIO) -> None:
        """Write every line to ``stream``."""
        for line in self.lines():
            print(line, file=stream)
