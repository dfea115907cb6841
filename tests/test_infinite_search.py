"""Tests for the infinite search feed state."""

import pytest

from forum.discussions.services.search.infinite_search import InfiniteSearch


class PagedSource:
    """Serves a fixed list of posts page by page and records each request."""

    def __init__(self, total: int):
        self.items = [{"title": f"post {i}"} for i in range(total)]
        self.requests = []

    def __call__(self, query, page, per_page):
        self.requests.append((query, page, per_page))
        start = (page - 1) * per_page
        return self.items[start:start + per_page]


def test_new_feed_is_loading_and_empty():
    feed = InfiniteSearch(PagedSource(3), None, 5)

    assert feed.is_loading is True
    assert feed.is_fetched is False
    assert feed.posts == []
    assert feed.is_empty is True
    assert feed.has_more is False


def test_load_fetches_first_page_once():
    source = PagedSource(12)
    feed = InfiniteSearch(source, "term", 5)

    feed.load()
    feed.load()

    assert source.requests == [("term", 1, 5)]
    assert feed.is_loading is False
    assert len(feed.posts) == 5
    assert feed.has_more is True


def test_posts_are_flattened_in_fetch_order():
    feed = InfiniteSearch(PagedSource(12), None, 5).load()

    feed.fetch_next_page()
    feed.fetch_next_page()

    assert [p["title"] for p in feed.posts] == [f"post {i}" for i in range(12)]
    assert feed.has_more is False


def test_exactly_full_last_page_costs_one_empty_fetch():
    source = PagedSource(10)
    feed = InfiniteSearch(source, None, 5).load()

    feed.fetch_next_page()
    assert len(feed.posts) == 10
    assert feed.has_more is True

    feed.fetch_next_page()
    assert feed.pages[-1] == []
    assert len(feed.posts) == 10
    assert feed.has_more is False
    assert [page for _, page, _ in source.requests] == [1, 2, 3]


def test_no_results_is_empty_after_fetch():
    feed = InfiniteSearch(PagedSource(0), None, 5).load()

    assert feed.is_fetched is True
    assert feed.is_empty is True
    assert feed.has_more is False


def test_per_page_must_be_positive():
    with pytest.raises(ValueError):
        InfiniteSearch(PagedSource(1), None, 0)
