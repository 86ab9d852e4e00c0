import streamlit as st

from config import DEFAULT_AEROSPIKE_HOST, DEFAULT_AEROSPIKE_PORT
from utils.api import APIClient, error_message, is_ok
from utils.errors import ConnectionFailed
from utils.formatters import format_date, profile_label
from utils.helper import get_api, get_view_state
from utils.styles import badge
from utils.view_state import ViewState


def connect(api: APIClient, state: ViewState, host: str, port: int,
            username: str = "", password: str = "") -> dict:
    """Connect the backend and reset the browser; raises ConnectionFailed."""
    resp = api.connect(host, port, username or None, password or None)
    if not is_ok(resp):
        raise ConnectionFailed(error_message(resp, "Connection failed"))
    info = resp.get("data") or {}
    if not info.get("connected"):
        raise ConnectionFailed(info.get("message") or "Connection failed")
    state.update_connection_status(info)
    return info


def disconnect(api: APIClient, state: ViewState) -> None:
    """Disconnect the backend and reset the browser; raises ConnectionFailed."""
    resp = api.disconnect()
    if not is_ok(resp):
        raise ConnectionFailed(error_message(resp, "Disconnect failed"))
    state.update_connection_status({"connected": False})


def _render_status(state: ViewState):
    info = state.connection or {}
    st.markdown(badge(state.connected), unsafe_allow_html=True)
    if not state.connected:
        return
    st.write(f"**Cluster:** {info.get('cluster_name') or '-'}")
    nodes = info.get("nodes") or []
    if nodes:
        st.caption(f"{len(nodes)} node(s)")
        for node in nodes:
            icon = "🟢" if node.get("active") else "🔴"
            st.write(f"{icon} `{node.get('name')}` {node.get('address')}")


def _render_profiles(api: APIClient) -> dict:
    """Profile selector. Returns the selected profile (or {})."""
    resp = api.list_profiles()
    if not is_ok(resp):
        st.warning(f"Saved profiles unavailable: {error_message(resp)}")
        return {}
    profiles = resp.get("data") or []
    if not profiles:
        st.caption("No saved profiles yet.")
        return {}

    active_id = None
    active_resp = api.get_active_profile()
    if is_ok(active_resp):
        active_id = (active_resp.get("data") or {}).get("profile_id")

    ids = [p["id"] for p in profiles]
    index = ids.index(active_id) if active_id in ids else 0
    by_id = {p["id"]: p for p in profiles}
    selected_id = st.selectbox(
        "Saved profiles",
        ids,
        index=index,
        format_func=lambda pid: profile_label(by_id[pid]),
    )
    profile = by_id[selected_id]
    st.caption(f"Saved {format_date(profile.get('created_at'))}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Use profile", use_container_width=True):
            api.set_active_profile(selected_id)
            st.rerun()
    with col2:
        if st.button("Delete profile", use_container_width=True):
            del_resp = api.delete_profile(selected_id)
            if is_ok(del_resp):
                st.success("Profile deleted")
                st.rerun()
            else:
                st.error(error_message(del_resp, "Could not delete profile"))
    return by_id.get(active_id) or {}


def render():
    st.title("Connection")

    api = get_api()
    state = get_view_state()

    col_form, col_status = st.columns([3, 2])

    with col_status:
        st.subheader("Status")
        _render_status(state)
        if state.connected and st.button("Disconnect", use_container_width=True):
            try:
                disconnect(api, state)
                st.rerun()
            except ConnectionFailed as e:
                st.error(e.message)

    with col_form:
        st.subheader("Profiles")
        profile = _render_profiles(api)

        st.divider()
        st.subheader("Connect")
        with st.form("connect_form"):
            host = st.text_input("Host", value=profile.get("host") or DEFAULT_AEROSPIKE_HOST)
            port = st.number_input(
                "Port",
                min_value=1,
                max_value=65535,
                value=int(profile.get("port") or DEFAULT_AEROSPIKE_PORT),
            )
            username = st.text_input("Username", value=profile.get("username") or "")
            password = st.text_input(
                "Password", value=profile.get("password") or "", type="password"
            )
            profile_name = st.text_input(
                "Profile name",
                placeholder="Fill in to save these settings",
            )
            col1, col2 = st.columns(2)
            with col1:
                submitted = st.form_submit_button("Connect", use_container_width=True)
            with col2:
                save = st.form_submit_button("Save profile", use_container_width=True)

        if save:
            if not profile_name.strip() or not host.strip():
                st.error("Profile name and host are required")
            else:
                resp = api.create_profile(profile_name.strip(), host.strip(), int(port), username, password)
                if is_ok(resp):
                    api.set_active_profile(resp["data"]["id"])
                    st.success("Profile saved")
                    st.rerun()
                else:
                    st.error(error_message(resp, "Could not save profile"))

        if submitted:
            if not host.strip():
                st.error("Host is required")
            else:
                try:
                    with st.spinner("Connecting..."):
                        info = connect(api, state, host.strip(), int(port), username, password)
                    st.success(f"Connected to {info.get('cluster_name') or host}")
                    st.rerun()
                except ConnectionFailed as e:
                    st.error(e.message)
