import streamlit as st

from utils.api import error_message, is_ok
from utils.display_figure import build_sets_dataframe, create_sets_chart
from utils.formatters import format_bytes, format_count
from utils.helper import get_api, get_view_state


def render():
    st.title("Namespace Statistics")

    api = get_api()
    state = get_view_state()

    if not state.connected:
        st.info("Connect to a cluster to see statistics.")
        return

    namespaces = [ns["name"] for ns in state.namespaces or []]
    if not namespaces:
        resp = api.list_namespaces()
        if not is_ok(resp):
            st.error(error_message(resp, "Failed to load namespaces"))
            return
        namespaces = [ns["name"] for ns in resp.get("data") or []]
    if not namespaces:
        st.info("No namespaces found")
        return

    default = state.selected_namespace
    namespace = st.selectbox(
        "Namespace",
        namespaces,
        index=namespaces.index(default) if default in namespaces else 0,
    )

    with st.spinner("Loading statistics..."):
        resp = api.namespace_stats(namespace)
    if not is_ok(resp):
        st.error(error_message(resp, "Failed to load statistics"))
        return
    stats = resp.get("data") or {}

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Sets", format_count(stats.get("total_sets")))
    col2.metric("Records", format_count(stats.get("total_records")))
    col3.metric("Memory", format_bytes(stats.get("total_memory_bytes")))
    col4.metric("Device", format_bytes(stats.get("total_device_bytes")))

    sets = stats.get("sets") or []
    st.plotly_chart(
        create_sets_chart(sets, st.session_state.get("theme", "dark")),
        use_container_width=True,
        key="sets_chart",
    )
    if sets:
        st.dataframe(build_sets_dataframe(sets), use_container_width=True, hide_index=True)
