"""Main entry point for the Discussions search page."""
import streamlit as st
from forum.logging_logs.log_config import setup_logging

# Page configuration
st.set_page_config(
    page_title="Discussions",
    page_icon="💬",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# Custom CSS for compact responsive theme
st.markdown("""
<style>
    .main .block-container {
        padding-top: 0.5rem;
        padding-bottom: 0rem;
        max-width: 100%;
    }

    h3 {
        font-size: 1.2rem !important;
        margin-bottom: 0.3rem !important;
        margin-top: 0.3rem !important;
    }

    .stButton > button {
        background-color: #2563eb;
        color: white;
        border: none;
        border-radius: 6px;
        padding: 0.4rem 0.8rem;
        font-weight: 500;
        font-size: 0.9rem;
        width: 100%;
    }
    .stButton > button:hover {
        background-color: #1d4ed8;
    }

    @media (max-width: 768px) {
        .main .block-container {
            padding-left: 0.5rem;
            padding-right: 0.5rem;
        }
    }
</style>
""", unsafe_allow_html=True)

def main():
    """Main application entry point."""
    setup_logging()

    from views.search_view import show_search_page
    show_search_page()

if __name__ == "__main__":
    main()
