"""
Console error types and panel display states.

Every failure the UI can show is one of these, carrying a single
human-readable message.
"""
from enum import Enum
from typing import Optional


class ConsoleError(Exception):
    """Base class for errors shown in the console."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConnectionFailed(ConsoleError):
    """Connect or disconnect failed. Shown next to the connection form."""


class FetchError(ConsoleError):
    """Namespace/set listing, scan or search failed."""


class ValidationError(ConsoleError):
    """Local input check failed before anything was sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MutationError(ConsoleError):
    """Put or delete failed. The record collection is left as it was."""


class PanelState(str, Enum):
    """What a panel shows. Exactly one at a time."""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


def panel_state(loading: bool, error: Optional[str], items) -> PanelState:
    """Resolve the display state of a panel; loading wins over error, error over empty."""
    if loading:
        return PanelState.LOADING
    if error:
        return PanelState.ERROR
    if not items:
        return PanelState.EMPTY
    return PanelState.READY
