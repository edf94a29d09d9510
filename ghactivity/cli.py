"""Show a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import sys
import typing as typ

from ghactivity.github import ActivityFeed, GitHubActivityError, GitHubEventsClient
from ghactivity.logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_error,
    log_warning,
)

if typ.TYPE_CHECKING:
    import httpx

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def run_activity(
    username: str,
    *,
    client: GitHubEventsClient | None = None,
    stdout: typ.TextIO | None = None,
) -> ActivityFeed:
    """Fetch ``username``'s feed and print one line per event.

    Parameters
    ----------
    username : str
        GitHub login to look up.
    client : GitHubEventsClient | None, optional
        Client to fetch with. When omitted a client is created and closed
        before returning.
    stdout : TextIO | None, optional
        Destination for the summary lines. Defaults to ``sys.stdout``.

    Returns
    -------
    ActivityFeed
        The feed that was printed.

    Raises
    ------
    GitHubActivityError
        If fetching or decoding the feed fails. Nothing is printed then.

    """
    out = stdout if stdout is not None else sys.stdout
    if client is None:
        with GitHubEventsClient() as owned_client:
            feed = ActivityFeed.fetch(owned_client, username)
    else:
        feed = ActivityFeed.fetch(client, username)
    feed.display(out)
    return feed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gh-activity", description=__doc__)
    parser.add_argument("username", help="GitHub username whose events to show")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help=f"Diagnostic log level written to stderr (default {DEFAULT_LOG_LEVEL})",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    http_client: httpx.Client | None = None,
) -> int:
    """Run the command line.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    http_client : httpx.Client | None, optional
        HTTP client to send the request with, mainly for tests.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when the feed could not be fetched.
        Usage errors exit with argparse's status 2.

    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.username.strip():
        parser.error("username must be non-empty")

    normalized_level, invalid_level = configure_logging(args.log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid --log-level %r, falling back to %s",
            args.log_level,
            normalized_level,
        )

    client = GitHubEventsClient(http_client=http_client)
    try:
        run_activity(args.username, client=client)
    except GitHubActivityError as exc:
        log_error(logger, "Fetching activity for %s failed", args.username)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        client.close()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
