"""Infinite scroll component: renders accumulated pages with a load-more control."""
import logging

import streamlit as st

logger = logging.getLogger(__name__)

class InfiniteScrollComponent:
    def __init__(self, feed, key_prefix=""):
        self.feed = feed
        self.key_prefix = key_prefix

    def render(self, render_item):
        """Render every fetched item, then either the load-more button or the end message."""
        for item in self.feed.posts:
            render_item(item)

        if self.feed.has_more:
            if st.button("Load more", key=f"{self.key_prefix}_load_more"):
                try:
                    with st.spinner("Loading..."):
                        self.feed.fetch_next_page()
                except Exception as e:
                    logger.error(f"Loading page {len(self.feed.pages) + 1} failed: {e}")
                    st.error("❌ Could not load more posts")
                else:
                    st.rerun()
        else:
            st.markdown(
                '<p style="text-align: center;"><b>Yay! You have seen it all</b></p>',
                unsafe_allow_html=True
            )

        st.caption(f"Showing {len(self.feed.posts)} items")
