import streamlit as st

from utils.api import APIClient, error_message, is_ok
from utils.errors import MutationError, ValidationError
from utils.helper import get_api, get_dispatcher, get_view_state
from utils.normalizer import BIN_TYPES, build_record

NEW_OPTION = "➕ New..."


def _empty_bin() -> dict:
    return {"name": "", "value": "", "type": "string"}


def _init_form():
    if "new_bins" not in st.session_state:
        st.session_state.new_bins = [_empty_bin()]
    if "new_bins_version" not in st.session_state:
        st.session_state.new_bins_version = 0


def _reset_form():
    st.session_state.new_bins = [_empty_bin()]
    st.session_state.new_bins_version += 1


def create_record(api: APIClient, body: dict) -> dict:
    """Write a new record; raises MutationError on failure."""
    resp = api.put_record(body)
    if not is_ok(resp):
        raise MutationError(error_message(resp, "Failed to create record"))
    return resp.get("data") or {}


def _render_bin_rows(version: int) -> list[dict]:
    rows = []
    for i, row in enumerate(st.session_state.new_bins):
        col_name, col_type, col_value, col_remove = st.columns([3, 2, 4, 1])
        with col_name:
            name = st.text_input("Bin name", value=row["name"], key=f"bin_name_{version}_{i}")
        with col_type:
            bin_type = st.selectbox(
                "Type", BIN_TYPES, index=BIN_TYPES.index(row["type"]), key=f"bin_type_{version}_{i}"
            )
        with col_value:
            if bin_type == "boolean":
                checked = st.checkbox("Value", value=row["value"] == "true", key=f"bin_bool_{version}_{i}")
                value = "true" if checked else "false"
            else:
                value = st.text_input("Value", value=row["value"], key=f"bin_value_{version}_{i}")
        with col_remove:
            st.write("")
            if st.button("✕", key=f"bin_remove_{version}_{i}") and len(st.session_state.new_bins) > 1:
                st.session_state.new_bins.pop(i)
                st.rerun()
        rows.append({"name": name, "value": value, "type": bin_type})
    st.session_state.new_bins = rows
    return rows


def render():
    st.title("Add Record")

    api = get_api()
    state = get_view_state()

    if not state.connected:
        st.info("Connect to a cluster to add records.")
        return

    _init_form()
    version = st.session_state.new_bins_version

    namespaces = [ns["name"] for ns in state.namespaces or []]
    options = namespaces + [NEW_OPTION]
    default_ns = state.selected_namespace
    ns_choice = st.selectbox(
        "Namespace",
        options,
        index=options.index(default_ns) if default_ns in options else 0,
    )
    namespace = st.text_input("New namespace") if ns_choice == NEW_OPTION else ns_choice

    col1, col2 = st.columns(2)
    with col1:
        set_name = st.text_input("Set", value=state.selected_set or "", key=f"new_set_{version}")
    with col2:
        ttl_text = st.text_input(
            "TTL (seconds)", key=f"new_ttl_{version}", help="Leave blank for the namespace default"
        )
    col3, col4 = st.columns([3, 1])
    with col3:
        key = st.text_input("Key", key=f"new_key_{version}")
    with col4:
        key_type = st.selectbox("Key type", ["string", "integer", "bytes"], key=f"new_key_type_{version}")

    st.subheader("Bins")
    rows = _render_bin_rows(version)
    if st.button("➕ Add bin"):
        st.session_state.new_bins.append(_empty_bin())
        st.rerun()

    st.divider()
    if st.button("Create record", type="primary", use_container_width=True):
        try:
            body = build_record(namespace, set_name, key, rows, ttl_text, key_type)
            create_record(api, body)
        except (ValidationError, MutationError) as e:
            st.error(e.message)
            return

        st.success(f"Record {body['key']} created")
        _reset_form()
        if (body["namespace"], body["set_name"]) == (state.selected_namespace, state.selected_set):
            get_dispatcher(api, state).load_set()
