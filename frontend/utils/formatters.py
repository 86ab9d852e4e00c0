"""
Centralized formatting utilities for the console UI.
"""
from datetime import datetime
from typing import Optional


def format_count(value: Optional[int]) -> str:
    """Format a record count with thousands separators."""
    try:
        if value is None:
            return "-"
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return "-"


def format_bytes(value: Optional[int], decimals: int = 2) -> str:
    """Format a byte size as B/KB/MB/GB/TB."""
    try:
        if value is None:
            return "-"
        size = float(value)
        if size == 0:
            return "0 B"
        units = ["B", "KB", "MB", "GB", "TB"]
        index = 0
        while abs(size) >= 1024 and index < len(units) - 1:
            size /= 1024
            index += 1
        if index == 0:
            return f"{int(size)} B"
        return f"{size:.{decimals}f} {units[index]}"
    except (TypeError, ValueError):
        return "-"


def format_ttl(ttl: Optional[int]) -> str:
    """Format a TTL in seconds: "Never" for -1, "Default" when unset."""
    if ttl is None:
        return "Default"
    if ttl < 0:
        return "Never"
    if ttl == 0:
        return "0s"

    days, rest = divmod(int(ttl), 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds and not days:
        parts.append(f"{seconds}s")
    return " ".join(parts)


def format_expiration(expiration: Optional[str], fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    """Format an ISO expiration timestamp; None means the record never expires."""
    if not expiration:
        return "Never"
    try:
        dt = datetime.fromisoformat(expiration.replace('Z', '+00:00'))
        return dt.strftime(fmt)
    except (TypeError, ValueError):
        return "-"


def format_date(date_str: str, fmt: str = "%d/%m/%Y") -> str:
    """Format ISO date string for display."""
    try:
        if not date_str:
            return "-"
        dt = datetime.fromisoformat(date_str.replace('Z', '+00:00'))
        return dt.strftime(fmt)
    except (TypeError, ValueError):
        return "-"


def profile_label(profile: dict) -> str:
    """Label for a saved connection profile in a selector."""
    name = profile.get("name") or "Unnamed"
    host = profile.get("host") or "?"
    port = profile.get("port") or "?"
    return f"{name} ({host}:{port})"
