"""
View state for the record browser.

Owns the selection hierarchy (namespace > set > record), the record
collection and the connection status. Every change is written to the
backing mapping (``st.session_state`` in the app) in a single update, so a
rerun never sees a half-applied transition.
"""
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

from .errors import PanelState, panel_state
from .pagination import PAGE_KEY, Paginator

CONNECTION = "connection"
SELECTED_NAMESPACE = "selected_namespace"
SELECTED_SET = "selected_set"
SELECTED_RECORD = "selected_record"
RECORDS = "records"
RECORDS_LOADING = "records_loading"
RECORDS_ERROR = "records_error"
NAMESPACES = "namespaces"
EPOCH = "view_epoch"
TABLE_VERSION = "records_table_version"

DEFAULTS = {
    CONNECTION: None,
    SELECTED_NAMESPACE: None,
    SELECTED_SET: None,
    SELECTED_RECORD: None,
    RECORDS: [],
    RECORDS_LOADING: False,
    RECORDS_ERROR: None,
    NAMESPACES: None,
    EPOCH: 0,
    TABLE_VERSION: 0,
}


@dataclass(frozen=True)
class Ticket:
    """Identifies one fetch; results apply only while it is still current."""
    epoch: int
    namespace: Optional[str]
    set_name: Optional[str]


class ViewState:
    """Selection and record state of one console session."""

    def __init__(self, store: MutableMapping, page_size: int = 20):
        self._store = store
        for key, value in DEFAULTS.items():
            if key not in store:
                store[key] = list(value) if isinstance(value, list) else value
        self.paginator = Paginator(store, lambda: len(self.records), page_size)

    # ==================== Reads ====================

    @property
    def connection(self) -> Optional[dict]:
        return self._store[CONNECTION]

    @property
    def connected(self) -> bool:
        connection = self.connection
        return bool(connection and connection.get("connected"))

    @property
    def selected_namespace(self) -> Optional[str]:
        return self._store[SELECTED_NAMESPACE]

    @property
    def selected_set(self) -> Optional[str]:
        return self._store[SELECTED_SET]

    @property
    def selected_record(self) -> Optional[dict]:
        return self._store[SELECTED_RECORD]

    @property
    def records(self) -> list[dict]:
        return self._store[RECORDS]

    @property
    def records_error(self) -> Optional[str]:
        return self._store[RECORDS_ERROR]

    @property
    def namespaces(self) -> Optional[list[dict]]:
        return self._store[NAMESPACES]

    @property
    def epoch(self) -> int:
        return self._store[EPOCH]

    @property
    def table_key(self) -> str:
        """Widget key of the records table; changes whenever its row selection must reset."""
        return (
            f"records_table_{self.epoch}_{self._store[PAGE_KEY]}_{self._store[TABLE_VERSION]}"
        )

    def records_panel(self) -> PanelState:
        return panel_state(self._store[RECORDS_LOADING], self.records_error, self.records)

    # ==================== Transitions ====================

    def _apply(self, changes: dict[str, Any], bump: bool = False) -> None:
        if bump:
            changes[EPOCH] = self.epoch + 1
        self._store.update(changes)

    def _cleared_records(self) -> dict[str, Any]:
        return {
            SELECTED_RECORD: None,
            RECORDS: [],
            RECORDS_LOADING: False,
            RECORDS_ERROR: None,
            PAGE_KEY: 1,
        }

    def select_namespace(self, namespace: Optional[str]) -> None:
        """Select a namespace; clears the set, the record and the records."""
        changes = {SELECTED_NAMESPACE: namespace, SELECTED_SET: None}
        changes.update(self._cleared_records())
        self._apply(changes, bump=True)

    def select_set(self, set_name: Optional[str]) -> bool:
        """
        Select a set of the current namespace; clears the record.

        Returns:
            False (nothing changes) when no namespace is selected
        """
        if not self.selected_namespace:
            return False
        changes = {SELECTED_SET: set_name}
        changes.update(self._cleared_records())
        self._apply(changes, bump=True)
        return True

    def select_record(self, record: Optional[dict]) -> None:
        """
        Open a record in the editor, or close it with None.

        Closing also resets the row selection of the records table.
        """
        changes = {SELECTED_RECORD: record}
        if record is None:
            changes[TABLE_VERSION] = self._store[TABLE_VERSION] + 1
        self._apply(changes)

    def update_connection_status(self, connection: Optional[dict]) -> None:
        """
        Record a new connection status.

        Connecting or disconnecting always drops every selection, the
        records and the cached namespace listing.
        """
        changes = {
            CONNECTION: connection,
            SELECTED_NAMESPACE: None,
            SELECTED_SET: None,
            NAMESPACES: None,
        }
        changes.update(self._cleared_records())
        self._apply(changes, bump=True)

    def update_namespaces(self, namespaces: Optional[list[dict]]) -> None:
        """Cache the namespace listing for the current connection."""
        self._apply({NAMESPACES: namespaces})

    # ==================== Fetch tickets ====================

    def issue_ticket(self) -> Ticket:
        """Start a fetch for the current namespace/set; supersedes earlier tickets."""
        epoch = self.epoch + 1
        self._apply({EPOCH: epoch, RECORDS_LOADING: True})
        return Ticket(epoch, self.selected_namespace, self.selected_set)

    def is_current(self, ticket: Ticket) -> bool:
        return (
            ticket.epoch == self.epoch
            and ticket.namespace == self.selected_namespace
            and ticket.set_name == self.selected_set
        )

    def update_records(self, records: list[dict], ticket: Optional[Ticket] = None) -> bool:
        """
        Replace the record collection and go back to page 1.

        Returns:
            False when ``ticket`` is stale (nothing changes)
        """
        if ticket is not None and not self.is_current(ticket):
            return False
        self._apply({
            RECORDS: list(records),
            RECORDS_LOADING: False,
            RECORDS_ERROR: None,
            PAGE_KEY: 1,
        })
        return True

    def fail_records(self, message: str, ticket: Optional[Ticket] = None) -> bool:
        """Clear the records and show ``message`` in the records panel."""
        if ticket is not None and not self.is_current(ticket):
            return False
        self._apply({
            RECORDS: [],
            RECORDS_LOADING: False,
            RECORDS_ERROR: message,
            PAGE_KEY: 1,
        })
        return True
