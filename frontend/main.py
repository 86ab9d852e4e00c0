import streamlit as st
from streamlit_option_menu import option_menu

from config import APP_NAME
from utils.api import is_ok
from utils.helper import get_api, get_view_state, load_preferences, save_preference
from utils.styles import inject_styles
from views import add_record, browser, connection, stats

NAV_OPTIONS = ["Browser", "Stats", "Add Record", "Connection"]
NAV_ICONS = ["table", "bar-chart", "plus-square", "plug"]


def init_session(api):
    defaults = {
        "nav_page": "Connection",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    load_preferences(api)
    state = get_view_state()

    # Pick up a connection the backend already holds (e.g. after a page reload)
    if state.connection is None:
        resp = api.cluster_info()
        if is_ok(resp):
            state.update_connection_status(resp.get("data"))
            if state.connected:
                st.session_state.nav_page = "Browser"


def main():
    st.set_page_config(page_title=APP_NAME, layout="wide")
    api = get_api()
    init_session(api)
    inject_styles(st.session_state.get("theme", "dark"))

    # --- Sidebar navigation
    with st.sidebar:
        current_page = st.session_state.get("nav_page", "Connection")
        try:
            default_index = NAV_OPTIONS.index(current_page)
        except ValueError:
            default_index = 0

        page_selected = option_menu(
            menu_title=APP_NAME,
            options=NAV_OPTIONS,
            icons=NAV_ICONS,
            default_index=default_index,
            key="main_nav",
        )
        if page_selected != current_page:
            st.session_state["nav_page"] = page_selected
            st.rerun()

        st.divider()
        dark = st.toggle("Dark theme", value=st.session_state.get("theme", "dark") == "dark")
        theme = "dark" if dark else "light"
        if theme != st.session_state.get("theme"):
            save_preference(api, "theme", theme)
            st.rerun()

    page = st.session_state.get("nav_page", "Connection")

    # --- Routing
    if page == "Browser":
        browser.render()
    elif page == "Stats":
        stats.render()
    elif page == "Add Record":
        add_record.render()
    elif page == "Connection":
        connection.render()


if __name__ == "__main__":
    main()
