"""Search results page with infinite scroll and the top discussions panel."""
import logging

import streamlit as st
from components.infinite_scroll import InfiniteScrollComponent
from components.post_preview import render_post_preview
from components.top_discussions import show_top_discussions
from forum.discussions.config.settings import SEARCH_PER_PAGE
from forum.discussions.services.search.infinite_search import InfiniteSearch
from forum.discussions.services.search.search_service import SearchService

logger = logging.getLogger(__name__)

FEED_KEY = "search_feed"
PER_PAGE = SEARCH_PER_PAGE

def get_search_feed(query, search_service=None):
    """Feed for this query, kept across reruns; a new query starts a new feed."""
    feed = st.session_state.get(FEED_KEY)
    if feed is None or feed.query != query:
        if not search_service:
            search_service = SearchService()
        feed = InfiniteSearch(search_service.search_questions, query, PER_PAGE)
        st.session_state[FEED_KEY] = feed
    return feed

def show_search_page(search_service=None, question_service=None):
    """Display search results for the ``query`` URL parameter."""
    query = st.query_params.get("query")

    col1, col2 = st.columns([6, 2])

    with col1:
        if st.button("Refresh", key="search_refresh"):
            st.session_state.pop(FEED_KEY, None)

        feed = get_search_feed(query, search_service)

        if feed.is_loading:
            with st.spinner("fetching..."):
                try:
                    feed.load()
                except Exception as e:
                    # shown as the empty state, retried on the next rerun
                    logger.error(f"Search fetch failed for query {query!r}: {e}")

        if feed.is_fetched and not feed.is_empty:
            InfiniteScrollComponent(feed, key_prefix="search").render(render_post_preview)
        else:
            st.write("there is nothing here yet")

    with col2:
        show_top_discussions(question_service)
