import streamlit as st

from config import (
    API_URL,
    DEFAULT_EDITOR_WIDTH,
    DEFAULT_PAGE_SIZE,
    MAX_EDITOR_WIDTH,
    MIN_EDITOR_WIDTH,
    SCAN_MAX_RECORDS,
)
from utils.api import APIClient, is_ok
from utils.search import SearchDispatcher
from utils.styles import DEFAULT_THEME
from utils.view_state import ViewState


def get_api() -> APIClient:
    return APIClient(API_URL)


def get_view_state() -> ViewState:
    """View state backed by the Streamlit session."""
    return ViewState(st.session_state, page_size=DEFAULT_PAGE_SIZE)


def get_dispatcher(api: APIClient, state: ViewState) -> SearchDispatcher:
    return SearchDispatcher(
        api, state, max_records=SCAN_MAX_RECORDS, max_results=SCAN_MAX_RECORDS
    )


def load_preferences(api: APIClient):
    """Read theme and editor width once per session."""
    if st.session_state.get("preferences_loaded"):
        return
    theme = DEFAULT_THEME
    editor_width = DEFAULT_EDITOR_WIDTH
    resp = api.get_preferences()
    if is_ok(resp) and isinstance(resp.get("data"), dict):
        prefs = resp["data"]
        theme = prefs.get("theme") or theme
        try:
            editor_width = int(prefs.get("editor_width") or editor_width)
        except ValueError:
            editor_width = DEFAULT_EDITOR_WIDTH
    editor_width = max(MIN_EDITOR_WIDTH, min(MAX_EDITOR_WIDTH, editor_width))
    st.session_state.update({
        "theme": theme,
        "editor_width": editor_width,
        "preferences_loaded": True,
    })


def save_preference(api: APIClient, name: str, value):
    """Store a preference in the session and in the backend."""
    st.session_state[name] = value
    resp = api.set_preference(name, str(value))
    if not is_ok(resp):
        st.toast("Could not save preference")
