"""
lessondeck - Web viewer for lesson decks

Streamlit application that browses a deck with the same index, navigator
and HTML renderer the CLI uses.

Usage:
    streamlit run app.py
    LESSONDECK_SOURCE="Book.playground" streamlit run app.py
"""

import streamlit as st

from lessondeck.config import DeckSettings
from lessondeck.deck import Boundary, DeckNavigator, load_deck
from lessondeck.errors import DeckError
from lessondeck.viewer import DeckRenderer, RenderFormat, get_deck_css


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="lessondeck",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Load the deck once per session; the Reload button rebuilds it."""
    if "settings" not in st.session_state:
        st.session_state.settings = DeckSettings.from_env()

    if "index" not in st.session_state:
        reload_deck()

    if "current_unit_id" not in st.session_state:
        index = st.session_state.index
        st.session_state.current_unit_id = index.first().id if index else None


def reload_deck():
    """Build a fresh index from the configured source."""
    try:
        st.session_state.index = load_deck(st.session_state.settings.source)
        st.session_state.load_error = None
    except DeckError as e:
        st.session_state.index = None
        st.session_state.load_error = str(e)


def select_unit(unit_id: str):
    st.session_state.current_unit_id = unit_id
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Unit List
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with the ordered unit list."""
    index = st.session_state.index
    st.sidebar.title(f"📚 {index.title if index and index.title else 'lessondeck'}")

    if st.sidebar.button("Reload deck", use_container_width=True):
        reload_deck()
        st.rerun()

    if not index:
        st.sidebar.error(st.session_state.load_error or "No deck loaded.")
        return

    st.sidebar.markdown(f"**{len(index)} lessons** from `{st.session_state.settings.source}`")
    st.sidebar.divider()

    current_id = st.session_state.current_unit_id
    for unit in index.all():
        label = unit.title[:30] + "..." if len(unit.title) > 30 else unit.title
        if st.sidebar.button(
            f"{'→ ' if unit.id == current_id else ''}{unit.position}. {label}",
            key=f"unit_{unit.id}",
            use_container_width=True,
        ):
            select_unit(unit.id)


# -----------------------------------------------------------------------------
# Main Content: Unit View
# -----------------------------------------------------------------------------

def render_navigation_bar(unit_id: str):
    """Render navigation bar with prev/next buttons."""
    nav = DeckNavigator(st.session_state.index)
    pos, total = nav.position(unit_id)
    previous = nav.previous(unit_id)
    following = nav.next(unit_id)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if previous is not Boundary.START and st.button("← Previous", use_container_width=True):
            select_unit(previous.id)

    with col2:
        st.markdown(
            f"<div style='text-align:center;color:#666;'>Lesson {pos} of {total}</div>",
            unsafe_allow_html=True,
        )

    with col3:
        if following is not Boundary.END and st.button("Next →", use_container_width=True):
            select_unit(following.id)


def render_unit_view():
    """Render the current unit."""
    index = st.session_state.index
    if not index:
        st.error(st.session_state.load_error or "No deck loaded.")
        st.code("LESSONDECK_SOURCE=path/to/lessons streamlit run app.py")
        return

    unit_id = st.session_state.current_unit_id
    if unit_id not in index:
        unit_id = index.first().id
        st.session_state.current_unit_id = unit_id

    render_navigation_bar(unit_id)

    unit = index.get(unit_id)
    fmt = st.radio(
        "Format",
        [fmt.value for fmt in RenderFormat],
        horizontal=True,
        label_visibility="collapsed",
    )
    output = DeckRenderer(total=len(index)).render(unit, fmt)

    if output.format == RenderFormat.HTML:
        st.markdown(get_deck_css(), unsafe_allow_html=True)
        st.markdown(output.content, unsafe_allow_html=True)
    elif output.format == RenderFormat.MARKDOWN:
        st.markdown(output.content)
    else:
        st.text(output.content)

    st.download_button(
        "Download",
        data=output.content,
        file_name=f"{unit.id}{output.extension}",
    )


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_unit_view()


if __name__ == "__main__":
    main()
