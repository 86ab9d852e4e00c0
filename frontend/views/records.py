import streamlit as st

from config import PAGE_SIZES
from utils.display_figure import build_records_dataframe
from utils.errors import PanelState
from utils.search import MATCH_TYPES, SearchDispatcher, SearchOutcome
from utils.view_state import ViewState


def _render_search(dispatcher: SearchDispatcher):
    with st.form("search_form"):
        col1, col2 = st.columns([3, 1])
        with col1:
            pattern = st.text_input("Key", placeholder="Search by key", label_visibility="collapsed")
        with col2:
            match_type = st.selectbox("Match", MATCH_TYPES, label_visibility="collapsed")
        col3, col4 = st.columns(2)
        with col3:
            submitted = st.form_submit_button("Search", use_container_width=True)
        with col4:
            cleared = st.form_submit_button("Clear", use_container_width=True)

    if submitted or cleared:
        outcome = dispatcher.search(pattern, match_type, clear=cleared)
        if outcome != SearchOutcome.SKIPPED:
            st.rerun()


def _render_pager(state: ViewState, total: int):
    paginator = state.paginator
    page = paginator.page(state.records)

    col_info, col_size = st.columns([3, 1])
    with col_info:
        st.caption(f"Showing {page.start_index + 1}-{page.end_index} of {total} records")
    with col_size:
        size = st.selectbox(
            "Page size",
            PAGE_SIZES,
            index=PAGE_SIZES.index(paginator.page_size) if paginator.page_size in PAGE_SIZES else 0,
            label_visibility="collapsed",
        )
        if size != paginator.page_size:
            paginator.set_page_size(size)
            st.rerun()
    return page


def _render_nav(state: ViewState):
    paginator = state.paginator
    col_prev, col_page, col_next = st.columns([1, 2, 1])
    with col_prev:
        if st.button("← Previous", disabled=paginator.current_page <= 1, use_container_width=True):
            paginator.previous()
            st.rerun()
    with col_page:
        st.markdown(
            f"<div style='text-align:center'>Page {paginator.current_page} of {paginator.total_pages}</div>",
            unsafe_allow_html=True,
        )
    with col_next:
        if st.button(
            "Next →",
            disabled=paginator.current_page >= paginator.total_pages,
            use_container_width=True,
        ):
            paginator.next()
            st.rerun()


def render(state: ViewState, dispatcher: SearchDispatcher):
    if not state.selected_set:
        st.info("Select a set to view its records.")
        return

    st.subheader(f"{state.selected_namespace} · {state.selected_set}")
    _render_search(dispatcher)

    panel = state.records_panel()
    if panel == PanelState.LOADING:
        st.info("Loading records...")
        return
    if panel == PanelState.ERROR:
        st.error(state.records_error)
        return
    if panel == PanelState.EMPTY:
        st.info("No records found")
        return

    page = _render_pager(state, len(state.records))
    event = st.dataframe(
        build_records_dataframe(page.records),
        use_container_width=True,
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        key=state.table_key,
    )
    rows = event.selection.rows if event is not None else []
    if rows:
        record = page.records[rows[0]]
        if record != state.selected_record:
            state.select_record(record)
            st.rerun()

    if state.paginator.total_pages > 1:
        _render_nav(state)
