"""
Search dispatcher for the records panel.

Decides between an unfiltered scan and a key-pattern search, sends the
request and applies the result to the view state, unless a newer fetch or a
selection change made it stale.
"""
import logging
from enum import Enum

from .api import error_message, is_ok
from .errors import FetchError
from .view_state import ViewState

logger = logging.getLogger(__name__)

MATCH_TYPES = ("EXACT", "PREFIX", "SUFFIX", "CONTAINS")


class SearchOutcome(str, Enum):
    """Result of one dispatch."""
    SKIPPED = "skipped"  # no namespace/set selected, nothing sent
    SCANNED = "scanned"
    SEARCHED = "searched"
    FAILED = "failed"
    STALE = "stale"  # a newer fetch or selection won, nothing applied


class SearchDispatcher:
    """Runs scans and searches for the selected namespace/set."""

    def __init__(self, api, state: ViewState, max_records: int = 100, max_results: int = 100):
        self.api = api
        self.state = state
        self.max_records = max_records
        self.max_results = max_results

    def search(self, pattern: str, match_type: str = "EXACT", clear: bool = False) -> SearchOutcome:
        """
        Search the selected set.

        Args:
            pattern: Key pattern; blank means a plain scan
            match_type: EXACT, PREFIX, SUFFIX or CONTAINS
            clear: Drop the filter and scan

        Returns:
            What happened. On failure the records are cleared and the message
            is in ``state.records_error``.
        """
        namespace = self.state.selected_namespace
        set_name = self.state.selected_set
        if not namespace or not set_name:
            return SearchOutcome.SKIPPED
        if match_type not in MATCH_TYPES:
            raise ValueError(f"Unknown match type: {match_type}")

        ticket = self.state.issue_ticket()
        if clear or not (pattern or "").strip():
            outcome = SearchOutcome.SCANNED
            resp = self.api.scan_records(namespace, set_name, self.max_records)
        else:
            outcome = SearchOutcome.SEARCHED
            resp = self.api.search_records(
                namespace, set_name, pattern, match_type, self.max_results
            )

        if not self.state.is_current(ticket):
            logger.debug(f"Dropped stale results for {namespace}.{set_name}")
            return SearchOutcome.STALE

        try:
            records = self._records_from(resp)
        except FetchError as e:
            self.state.fail_records(e.message, ticket)
            return SearchOutcome.FAILED

        self.state.update_records(records, ticket)
        return outcome

    def load_set(self) -> SearchOutcome:
        """Unfiltered scan of the selected set."""
        return self.search("", clear=True)

    def _records_from(self, resp: dict) -> list[dict]:
        if not is_ok(resp):
            raise FetchError(error_message(resp, "Failed to load records"))
        data = resp.get("data")
        if not isinstance(data, list):
            raise FetchError("Unexpected response while loading records")
        return data
