import streamlit as st

from config import MAX_EDITOR_WIDTH, MIN_EDITOR_WIDTH
from utils.api import APIClient, error_message, is_ok
from utils.errors import MutationError, ValidationError
from utils.formatters import format_expiration, format_ttl
from utils.helper import save_preference
from utils.normalizer import bins_to_editor_text, editor_text_to_bins, parse_ttl
from utils.search import SearchDispatcher
from utils.view_state import ViewState


def save_record(api: APIClient, record: dict, bins_text: str, ttl_text: str) -> dict:
    """
    Validate the editor fields and write the record.

    Raises:
        ValidationError: bins or TTL are malformed (nothing is sent)
        MutationError: the write failed
    """
    bins = editor_text_to_bins(bins_text)
    ttl = parse_ttl(ttl_text)
    resp = api.put_record({
        "namespace": record["namespace"],
        "set_name": record["set_name"],
        "key": record["key"],
        "key_type": record.get("key_type", "string"),
        "bins": bins,
        "ttl": ttl,
    })
    if not is_ok(resp):
        raise MutationError(error_message(resp, "Failed to save record"))
    return resp.get("data") or {}


def delete_record(api: APIClient, record: dict) -> None:
    """Delete the record; raises MutationError on failure."""
    resp = api.delete_record(
        record["namespace"],
        record["set_name"],
        record["key"],
        record.get("key_type", "string"),
    )
    if not is_ok(resp):
        raise MutationError(error_message(resp, "Failed to delete record"))


def render(api: APIClient, state: ViewState, dispatcher: SearchDispatcher):
    record = state.selected_record
    if not record:
        return

    col_title, col_close = st.columns([4, 1])
    with col_title:
        st.subheader("Record")
    with col_close:
        if st.button("✕", key="close_editor"):
            state.select_record(None)
            st.rerun()

    st.markdown(
        f"<div class='record-meta'>key: {record.get('key')}<br>"
        f"generation: {record.get('generation', '-')}<br>"
        f"ttl: {format_ttl(record.get('ttl'))}<br>"
        f"expires: {format_expiration(record.get('expiration'))}</div>",
        unsafe_allow_html=True,
    )

    form_key = f"{record['namespace']}_{record.get('set_name')}_{record['key']}_{record.get('generation')}"
    ttl = record.get("ttl")
    with st.form(f"editor_{form_key}"):
        ttl_text = st.text_input(
            "TTL (seconds)",
            value="" if ttl is None else str(ttl),
            help="Leave blank for the namespace default, -1 to never expire",
        )
        bins_text = st.text_area(
            "Bins (JSON)",
            value=bins_to_editor_text(record.get("bins") or {}),
            height=360,
        )
        col1, col2 = st.columns(2)
        with col1:
            saved = st.form_submit_button("Save", use_container_width=True)
        with col2:
            cancelled = st.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        state.select_record(None)
        st.rerun()

    if saved:
        try:
            stored = save_record(api, record, bins_text, ttl_text)
        except (ValidationError, MutationError) as e:
            st.error(e.message)
        else:
            state.select_record(stored)
            dispatcher.load_set()
            st.toast("Record saved")
            st.rerun()

    with st.expander("Danger zone"):
        if st.button("Delete record", type="primary", use_container_width=True):
            try:
                delete_record(api, record)
            except MutationError as e:
                st.error(e.message)
            else:
                state.select_record(None)
                dispatcher.load_set()
                st.rerun()

    width = st.slider(
        "Editor width",
        min_value=MIN_EDITOR_WIDTH,
        max_value=MAX_EDITOR_WIDTH,
        value=int(st.session_state.get("editor_width", 500)),
        step=50,
    )
    if width != st.session_state.get("editor_width"):
        save_preference(api, "editor_width", width)
        st.rerun()
