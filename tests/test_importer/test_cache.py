"""Tests for the pull request cache."""

import threading

import pytest

from github_to_jira.cache import PullRequestCache
from github_to_jira.exceptions import MissingCacheEntry
from github_to_jira.github_client.models import PullRequestDescriptor


def pull_request(number: int, title: str = "t") -> PullRequestDescriptor:
    return PullRequestDescriptor(number=number, url=f"u{number}", title=title)


class TestPullRequestCache:
    """Test PullRequestCache class."""

    def test_put_and_get(self) -> None:
        cache = PullRequestCache()
        cache.put(pull_request(1))

        assert cache.get(1).url == "u1"
        assert 1 in cache
        assert len(cache) == 1

    def test_missing_entry(self) -> None:
        with pytest.raises(MissingCacheEntry, match="No PR with number 5 found in the cache"):
            PullRequestCache().get(5)

    def test_missing_entry_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            PullRequestCache().get(5)

    def test_put_all_overwrites(self) -> None:
        cache = PullRequestCache()
        cache.put(pull_request(1, "old"))
        cache.put_all([pull_request(1, "new"), pull_request(2)])

        assert cache.get(1).title == "new"
        assert len(cache) == 2

    def test_clear(self) -> None:
        cache = PullRequestCache()
        cache.put(pull_request(1))
        cache.clear()
        assert 1 not in cache

    def test_concurrent_puts(self) -> None:
        cache = PullRequestCache()
        threads = [
            threading.Thread(
                target=cache.put_all,
                args=([pull_request(n) for n in range(start, start + 100)],),
            )
            for start in range(0, 1000, 100)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 1000
