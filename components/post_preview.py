"""Compact preview card for a question."""
import streamlit as st

BODY_PREVIEW_CHARS = 280

def creator_name(post):
    creator = post.get("createdBy")
    if not isinstance(creator, dict):
        return "unknown"
    return creator.get("username") or creator.get("name") or creator.get("email") or "unknown"

def body_excerpt(body, limit=BODY_PREVIEW_CHARS):
    body = (body or "").strip()
    if len(body) <= limit:
        return body
    return body[:limit].rstrip() + "..."

def render_post_preview(post):
    """Display title, body excerpt, creator and counters of one question."""
    computed = post.get("computed") or {}

    with st.container(border=True):
        st.markdown(f"**{post.get('title', '')}**")
        st.write(body_excerpt(post.get("body")))
        st.caption(
            f"by {creator_name(post)} · "
            f"{computed.get('answers', 0)} answers · {computed.get('likes', 0)} likes"
        )
