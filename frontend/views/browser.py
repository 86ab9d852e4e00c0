import streamlit as st

from utils.api import APIClient, error_message, is_ok
from utils.errors import FetchError
from utils.formatters import format_count
from utils.helper import get_api, get_dispatcher, get_view_state
from utils.search import SearchDispatcher
from utils.view_state import ViewState
from views import editor, records


def fetch_namespaces(api: APIClient) -> list[dict]:
    """
    Namespaces with their sets.

    A namespace whose set listing fails is kept with no sets.

    Raises:
        FetchError: the namespace listing itself failed
    """
    resp = api.list_namespaces()
    if not is_ok(resp):
        raise FetchError(error_message(resp, "Failed to load namespaces"))

    namespaces = []
    for ns in resp.get("data") or []:
        sets_resp = api.list_sets(ns["name"])
        sets = sets_resp.get("data") if is_ok(sets_resp) else None
        namespaces.append({**ns, "sets": sets or []})
    return namespaces


def _render_tree(state: ViewState, dispatcher: SearchDispatcher):
    st.subheader("Namespaces")
    if st.button("↻ Refresh", use_container_width=True):
        state.update_namespaces(None)
        st.rerun()

    for ns in state.namespaces or []:
        name = ns["name"]
        expanded = name == state.selected_namespace
        with st.expander(f"{name} · {format_count(ns.get('master_objects'))}", expanded=expanded):
            sets = ns.get("sets") or []
            if not sets:
                st.caption("No sets")
            for s in sets:
                set_name = s["set_name"]
                selected = expanded and set_name == state.selected_set
                label = f"{'▸ ' if selected else ''}{set_name} ({format_count(s.get('object_count'))})"
                if st.button(label, key=f"set_{name}_{set_name}", use_container_width=True):
                    if name != state.selected_namespace:
                        state.select_namespace(name)
                    state.select_set(set_name)
                    dispatcher.load_set()
                    st.rerun()


def render():
    st.title("Browser")

    api = get_api()
    state = get_view_state()

    if not state.connected:
        st.info("Connect to a cluster to browse records.")
        return

    if state.namespaces is None:
        try:
            with st.spinner("Loading namespaces..."):
                state.update_namespaces(fetch_namespaces(api))
        except FetchError as e:
            st.error(e.message)
            if st.button("Retry"):
                st.rerun()
            return

    dispatcher = get_dispatcher(api, state)

    if state.selected_record:
        width = st.session_state.get("editor_width", 500)
        col_tree, col_records, col_editor = st.columns([300, 900, width])
    else:
        col_tree, col_records = st.columns([1, 3])
        col_editor = None

    with col_tree:
        _render_tree(state, dispatcher)

    with col_records:
        records.render(state, dispatcher)

    if col_editor is not None:
        with col_editor:
            editor.render(api, state, dispatcher)
