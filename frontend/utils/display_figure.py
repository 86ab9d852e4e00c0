import pandas as pd
import plotly.graph_objects as go
from typing import List, Dict

from .formatters import format_bytes, format_expiration, format_ttl
from .normalizer import format_value
from .styles import get_colors

META_COLUMNS = ["Key", "TTL", "Generation", "Expires"]


def bin_columns(records: List[Dict]) -> List[str]:
    """Union of bin names across records, in first-seen order."""
    names: Dict[str, None] = {}
    for record in records:
        for name in (record.get("bins") or {}):
            names.setdefault(name, None)
    return list(names)


def build_records_dataframe(records: List[Dict]) -> pd.DataFrame:
    """
    Convert records into the table shown in the records panel.

    Columns are the record metadata followed by every bin name seen on the
    page; a record without a given bin shows "-".
    """
    if not records:
        return pd.DataFrame(columns=META_COLUMNS)

    bins = bin_columns(records)
    rows = []
    for record in records:
        values = record.get("bins") or {}
        row = [
            record.get("key", ""),
            format_ttl(record.get("ttl")),
            format_value(record.get("generation")),
            format_expiration(record.get("expiration")),
        ]
        row.extend(format_value(values.get(name)) for name in bins)
        rows.append(row)

    # rows are positional: a bin may share a name with a metadata column
    return pd.DataFrame(rows, columns=META_COLUMNS + bins)


def build_sets_dataframe(sets: List[Dict]) -> pd.DataFrame:
    """Set statistics table, in the order given."""
    rows = [
        {
            "Set": s.get("set_name", ""),
            "Objects": s.get("object_count", 0) or 0,
            "Memory": format_bytes(s.get("memory_data_bytes", 0) or 0),
            "Device": format_bytes(s.get("device_data_bytes", 0) or 0),
        }
        for s in sets
    ]
    return pd.DataFrame(rows, columns=["Set", "Objects", "Memory", "Device"])


def create_sets_chart(sets: List[Dict], theme: str = "dark") -> go.Figure:
    """
    Bar chart of object counts per set.

    Args:
        sets: Set statistics, largest first
        theme: UI theme name

    Returns:
        Plotly Figure
    """
    colors = get_colors(theme)
    fig = go.Figure()

    if not sets:
        fig.add_annotation(
            text="No sets in this namespace",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False,
            font=dict(size=16, color=colors["text_secondary"])
        )
    else:
        fig.add_trace(go.Bar(
            x=[s.get("set_name", "") for s in sets],
            y=[s.get("object_count", 0) or 0 for s in sets],
            marker_color=colors["accent_blue"],
            customdata=[format_bytes(s.get("device_data_bytes", 0) or 0) for s in sets],
            hovertemplate='<b>%{x}</b><br>Objects: %{y:,}<br>Device: %{customdata}<extra></extra>',
        ))

    fig.update_layout(
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor=colors["bg_secondary"],
        font=dict(color=colors["text_primary"]),
        height=380,
        margin=dict(l=40, r=20, t=20, b=40),
        xaxis=dict(gridcolor=colors["border"]),
        yaxis=dict(gridcolor=colors["border"], title="Objects"),
    )
    return fig
