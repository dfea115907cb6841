"""Infinite search feed - page accumulation behind the search page"""
from typing import Callable, Dict, List, Optional

PageFetcher = Callable[[Optional[str], int, int], List[Dict]]

class InfiniteSearch:
    """Accumulates pages of search results as the reader asks for more.

    ``has_more`` is a heuristic: the last page is full when its size is an
    exact multiple of ``per_page``. A final page that happens to be exactly
    full therefore costs one extra fetch returning nothing.
    """

    def __init__(self, fetch_page: PageFetcher, query: Optional[str], per_page: int):
        if per_page < 1:
            raise ValueError("per_page must be at least 1")
        self.fetch_page = fetch_page
        self.query = query
        self.per_page = per_page
        self.pages: List[List[Dict]] = []
        self.is_fetched = False

    @property
    def is_loading(self) -> bool:
        return not self.is_fetched

    @property
    def posts(self) -> List[Dict]:
        """All fetched pages flattened in fetch order"""
        return [post for page in self.pages for post in page]

    @property
    def is_empty(self) -> bool:
        return not self.posts

    @property
    def has_more(self) -> bool:
        if not self.pages:
            return False
        last_page = self.pages[-1]
        return len(last_page) > 0 and len(last_page) % self.per_page == 0

    def fetch_next_page(self) -> List[Dict]:
        page = self.fetch_page(self.query, len(self.pages) + 1, self.per_page)
        self.pages.append(list(page))
        self.is_fetched = True
        return page

    def load(self) -> "InfiniteSearch":
        """Fetch the first page unless it is already there"""
        if not self.is_fetched:
            self.fetch_next_page()
        return self
