"""
Global styles and CSS for the console UI.
Light and dark themes; the choice is stored as the "theme" preference.
"""

THEMES = {
    "dark": {
        "bg_primary": "#0d1117",
        "bg_secondary": "#161b22",
        "bg_card": "#21262d",
        "bg_hover": "#30363d",
        "border": "#30363d",
        "text_primary": "#f0f6fc",
        "text_secondary": "#8b949e",
        "text_muted": "#6e7681",
        "accent_green": "#3fb950",
        "accent_red": "#f85149",
        "accent_blue": "#58a6ff",
        "accent_purple": "#a371f7",
        "accent_yellow": "#d29922",
    },
    "light": {
        "bg_primary": "#ffffff",
        "bg_secondary": "#f6f8fa",
        "bg_card": "#ffffff",
        "bg_hover": "#eaeef2",
        "border": "#d0d7de",
        "text_primary": "#1f2328",
        "text_secondary": "#59636e",
        "text_muted": "#818b98",
        "accent_green": "#1a7f37",
        "accent_red": "#d1242f",
        "accent_blue": "#0969da",
        "accent_purple": "#8250df",
        "accent_yellow": "#9a6700",
    },
}

DEFAULT_THEME = "dark"


def get_colors(theme: str = DEFAULT_THEME) -> dict:
    """Color palette for a theme name, falling back to the default theme."""
    return THEMES.get(theme, THEMES[DEFAULT_THEME])


def get_global_css(theme: str = DEFAULT_THEME) -> str:
    """Return global CSS for the given theme."""
    colors = get_colors(theme)
    return f"""
    <style>
        .stApp {{
            background: {colors['bg_primary']};
            color: {colors['text_primary']};
        }}

        .console-card {{
            background: {colors['bg_card']};
            border: 1px solid {colors['border']};
            border-radius: 12px;
            padding: 16px;
            margin-bottom: 12px;
        }}

        .console-card-title {{
            color: {colors['text_primary']};
            font-size: 14px;
            font-weight: 600;
            margin-bottom: 8px;
        }}

        .console-card-meta {{
            color: {colors['text_secondary']};
            font-size: 12px;
        }}

        .console-stat {{
            font-size: 24px;
            font-weight: 700;
            color: {colors['accent_blue']};
        }}

        .badge-connected {{
            display: inline-block;
            padding: 4px 8px;
            border-radius: 4px;
            font-size: 11px;
            font-weight: 600;
            background: rgba(63, 185, 80, 0.2);
            color: {colors['accent_green']};
        }}

        .badge-disconnected {{
            display: inline-block;
            padding: 4px 8px;
            border-radius: 4px;
            font-size: 11px;
            font-weight: 600;
            background: rgba(248, 81, 73, 0.2);
            color: {colors['accent_red']};
        }}

        .record-meta {{
            color: {colors['text_secondary']};
            font-size: 12px;
            font-family: monospace;
        }}
    </style>
    """


def badge(connected: bool) -> str:
    """HTML badge for a connection state."""
    if connected:
        return '<span class="badge-connected">CONNECTED</span>'
    return '<span class="badge-disconnected">DISCONNECTED</span>'


def inject_styles(theme: str = DEFAULT_THEME):
    """Inject global styles into the Streamlit app."""
    import streamlit as st
    st.markdown(get_global_css(theme), unsafe_allow_html=True)
