"""
Tests for frontend/utils/view_state.py - Selection hierarchy and record state.
"""
import pytest

from frontend.utils.errors import PanelState, panel_state
from frontend.utils.pagination import PAGE_KEY
from frontend.utils.view_state import EPOCH, RECORDS, SELECTED_SET


class TestSelectionHierarchy:
    """Namespace > set > record."""

    def test_fresh_state(self, view_state):
        assert view_state.connected is False
        assert view_state.selected_namespace is None
        assert view_state.records == []
        assert view_state.records_panel() == PanelState.EMPTY

    def test_set_requires_namespace(self, view_state, mock_session_state):
        """Selecting a set without a namespace changes nothing."""
        epoch = view_state.epoch

        assert view_state.select_set("users") is False
        assert mock_session_state[SELECTED_SET] is None
        assert view_state.epoch == epoch

    def test_namespace_change_clears_set_and_records(self, selected_state, sample_record):
        selected_state.update_records([sample_record])
        selected_state.select_record(sample_record)

        selected_state.select_namespace("bar")

        assert selected_state.selected_namespace == "bar"
        assert selected_state.selected_set is None
        assert selected_state.selected_record is None
        assert selected_state.records == []

    def test_set_change_clears_record(self, selected_state, sample_record, mock_session_state):
        selected_state.update_records([sample_record])
        selected_state.select_record(sample_record)

        selected_state.select_set("orders")

        assert selected_state.selected_namespace == "test"
        assert selected_state.selected_set == "orders"
        assert selected_state.selected_record is None
        assert mock_session_state[PAGE_KEY] == 1

    def test_selecting_record_keeps_epoch(self, selected_state, sample_record):
        """Opening a record does not invalidate a fetch in flight."""
        epoch = selected_state.epoch

        selected_state.select_record(sample_record)

        assert selected_state.selected_record is sample_record
        assert selected_state.epoch == epoch

    def test_closing_record_resets_table_selection(self, selected_state, sample_record):
        """Opening keeps the table key; closing gives the table a fresh one."""
        selected_state.update_records([sample_record])
        key = selected_state.table_key

        selected_state.select_record(sample_record)
        assert selected_state.table_key == key

        selected_state.select_record(None)
        assert selected_state.selected_record is None
        assert selected_state.table_key != key


class TestConnectionStatus:
    """Connecting or disconnecting resets the browser."""

    @pytest.mark.parametrize("connection", [
        {"connected": True, "cluster_name": "other"},
        {"connected": False},
    ])
    def test_status_change_resets_everything(self, selected_state, sample_record, connection):
        selected_state.update_namespaces([{"name": "test", "sets": []}])
        selected_state.update_records([sample_record])
        selected_state.select_record(sample_record)

        selected_state.update_connection_status(connection)

        assert selected_state.connected is connection["connected"]
        assert selected_state.selected_namespace is None
        assert selected_state.selected_set is None
        assert selected_state.selected_record is None
        assert selected_state.records == []
        assert selected_state.namespaces is None


class TestFetchTickets:
    """Only the latest fetch for the current selection applies."""

    def test_ticket_marks_loading(self, selected_state):
        selected_state.issue_ticket()

        assert selected_state.records_panel() == PanelState.LOADING

    def test_current_ticket_applies(self, selected_state, records_25, mock_session_state):
        ticket = selected_state.issue_ticket()

        assert selected_state.update_records(records_25, ticket) is True
        assert len(selected_state.records) == 25
        assert mock_session_state[RECORDS] is not records_25
        assert selected_state.records_panel() == PanelState.READY

    def test_superseded_ticket_is_dropped(self, selected_state, records_25, sample_record):
        """An older response arriving last does not overwrite the newer one."""
        older = selected_state.issue_ticket()
        newer = selected_state.issue_ticket()

        assert selected_state.update_records([sample_record], newer) is True
        assert selected_state.update_records(records_25, older) is False
        assert selected_state.records == [sample_record]

    def test_selection_change_drops_ticket(self, selected_state, records_25):
        ticket = selected_state.issue_ticket()

        selected_state.select_set("orders")

        assert selected_state.is_current(ticket) is False
        assert selected_state.update_records(records_25, ticket) is False
        assert selected_state.records == []

    def test_failure_clears_records_and_sets_error(self, selected_state, records_25):
        selected_state.update_records(records_25)
        ticket = selected_state.issue_ticket()

        assert selected_state.fail_records("Failed to scan records: timeout", ticket) is True

        assert selected_state.records == []
        assert selected_state.records_error == "Failed to scan records: timeout"
        assert selected_state.records_panel() == PanelState.ERROR

    def test_success_clears_previous_error(self, selected_state, records_25):
        selected_state.fail_records("boom")

        selected_state.update_records(records_25)

        assert selected_state.records_error is None

    def test_records_reset_page(self, selected_state, records_25, mock_session_state):
        selected_state.update_records(records_25)
        selected_state.paginator.go_to(2)

        selected_state.update_records(records_25[:3])

        assert mock_session_state[PAGE_KEY] == 1

    def test_epoch_only_grows(self, selected_state, mock_session_state):
        epochs = [mock_session_state[EPOCH]]
        selected_state.issue_ticket()
        epochs.append(mock_session_state[EPOCH])
        selected_state.select_namespace("bar")
        epochs.append(mock_session_state[EPOCH])

        assert epochs == sorted(set(epochs))


class TestPanelState:
    """Tests for panel_state precedence."""

    def test_loading_wins(self):
        assert panel_state(True, "boom", [1]) == PanelState.LOADING

    def test_error_beats_empty(self):
        assert panel_state(False, "boom", []) == PanelState.ERROR

    def test_empty_and_ready(self):
        assert panel_state(False, None, []) == PanelState.EMPTY
        assert panel_state(False, None, [1]) == PanelState.READY
