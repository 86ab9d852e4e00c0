"""
Frontend test fixtures and mocks.

Mocks Streamlit session_state and the API client for isolated testing.
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Views import "utils.x" and "config" the way Streamlit runs them
FRONTEND_DIR = str(Path(__file__).parent.parent.parent / "frontend")


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


def ok(data, status=200):
    """A successful APIClient response."""
    return {"status": status, "data": data}


def failed(detail, status=502):
    """A failed APIClient response carrying a FastAPI detail."""
    return {"status": status, "data": {"detail": detail}}


@pytest.fixture
def mock_session_state():
    """Provide a mock session state for testing."""
    return MockSessionState()


@pytest.fixture
def mock_streamlit(mock_session_state):
    """Patch streamlit module with mocks and expose the frontend modules."""
    with patch.dict("sys.modules", {"streamlit": MagicMock()}):
        sys.path.insert(0, FRONTEND_DIR)
        try:
            st_mock = sys.modules["streamlit"]
            st_mock.session_state = mock_session_state
            yield st_mock
        finally:
            sys.path.remove(FRONTEND_DIR)


@pytest.fixture
def mock_api():
    """MagicMock APIClient; every call succeeds with empty data unless configured."""
    api = MagicMock()
    api.scan_records.return_value = ok([])
    api.search_records.return_value = ok([])
    return api


@pytest.fixture
def api_responses():
    """Common API response fixtures."""
    return {
        "health_ok": ok({"status": "healthy"}),
        "connected": ok({
            "connected": True,
            "cluster_name": "local-cluster",
            "nodes": [{"name": "BB9", "address": "127.0.0.1:3000", "active": True}],
            "message": "Connected successfully",
        }),
        "connect_refused": ok({"connected": False, "message": "Connection failed: refused"}),
        "not_connected": failed("Not connected to Aerospike. Please connect first.", status=409),
        "validation_error": {
            "status": 422,
            "data": {"detail": [{"loc": ["body", "bins"], "msg": "At least one bin is required"}]},
        },
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }


@pytest.fixture
def view_state(mock_session_state):
    """ViewState over a fresh session mapping."""
    from frontend.utils.view_state import ViewState

    return ViewState(mock_session_state, page_size=20)


@pytest.fixture
def selected_state(view_state):
    """ViewState with test.users selected."""
    view_state.update_connection_status({"connected": True})
    view_state.select_namespace("test")
    view_state.select_set("users")
    return view_state
