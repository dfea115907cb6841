"""Top discussions side panel."""
import logging

import streamlit as st
from forum.discussions.services.question.question_service import QuestionService

logger = logging.getLogger(__name__)

def show_top_discussions(question_service=None):
    """Render the top discussions widget, independent of any search state."""
    st.subheader("Top discussions")

    try:
        if not question_service:
            question_service = QuestionService()
        discussions = question_service.get_top_discussions()
    except Exception as e:
        logger.error(f"Top discussions fetch failed: {e}")
        st.error("❌ Could not load discussions")
        return

    if not discussions:
        st.caption("No discussions yet")
        return

    for question in discussions:
        answers = (question.get("computed") or {}).get("answers", 0)
        st.markdown(f"**{question.get('title', '')}**")
        st.caption(f"{answers} answers")
