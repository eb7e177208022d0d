"""In-memory store of fetched pull requests, keyed by number."""

import threading
from collections.abc import Iterable

from .exceptions import MissingCacheEntry
from .github_client.models import PullRequestDescriptor


class PullRequestCache:
    """Remembers pull requests between listing them and creating tickets.

    Entries live for the lifetime of the process. Access is guarded by a
    lock so one cache can be shared by concurrent requests.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[int, PullRequestDescriptor] = {}

    def put(self, pull_request: PullRequestDescriptor) -> None:
        with self._lock:
            self._entries[pull_request.number] = pull_request

    def put_all(self, pull_requests: Iterable[PullRequestDescriptor]) -> None:
        with self._lock:
            for pull_request in pull_requests:
                self._entries[pull_request.number] = pull_request

    def get(self, pr_number: int) -> PullRequestDescriptor:
        """Return a cached pull request.

        Raises:
            MissingCacheEntry: If the pull request was never fetched
        """
        with self._lock:
            try:
                return self._entries[pr_number]
            except KeyError:
                raise MissingCacheEntry(pr_number) from None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, pr_number: object) -> bool:
        with self._lock:
            return pr_number in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
