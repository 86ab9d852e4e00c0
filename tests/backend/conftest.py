"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing FastAPI routes, services, and the cluster client.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Aerospike client fakes
# =============================================================================

INFO_RESPONSES = {
    "cluster-name": "cluster-name\tlocal-cluster\n",
    "namespaces": "namespaces\ttest;bar\n",
    "namespace/test": (
        "namespace/test\tobjects=30;master_objects=25;effective_replication_factor=2;"
        "storage-engine=memory\n"
    ),
    "namespace/bar": "namespace/bar\tmaster_objects=0;replication-factor=1\n",
    "sets/test": (
        "sets/test\tns=test:set=users:objects=25:memory_data_bytes=2048:device_data_bytes=0;"
        "ns=test:set=orders:objects=100:memory_data_bytes=4096:device_data_bytes=512;\n"
    ),
    "sets/bar": "sets/bar\t\n",
}


def make_result(key, bins, namespace="test", set_name="users", ttl=3600, gen=1):
    """A (key, meta, bins) tuple as the client yields it."""
    return (
        (namespace, set_name, key, bytearray(b"\x01" * 20)),
        {"ttl": ttl, "gen": gen},
        bins,
    )


class FakeQuery:
    """Query stand-in that feeds results to foreach until the callback returns False."""

    def __init__(self, results):
        self.results = results
        self.delivered = 0

    def foreach(self, callback, *args, **kwargs):
        for result in self.results:
            self.delivered += 1
            if callback(result) is False:
                break


@pytest.fixture
def info_responses():
    """Canned info command responses."""
    return INFO_RESPONSES


@pytest.fixture
def result_factory():
    """Builder for (key, meta, bins) tuples."""
    return make_result


@pytest.fixture
def scan_results():
    """Results for test.users: user1..user25 plus admin."""
    results = [make_result(f"user{i}", {"n": i}) for i in range(1, 26)]
    results.append(make_result("admin", {"n": 0, "role": "root"}))
    return results


@pytest.fixture
def mock_aerospike_client(scan_results):
    """
    MagicMock standing in for an ``aerospike.client`` instance.

    Info commands answer from INFO_RESPONSES and queries iterate
    ``scan_results``.
    """
    client = MagicMock()
    client.is_connected.return_value = True
    client.get_node_names.return_value = [
        {"address": "127.0.0.1", "port": 3000, "node_name": "BB9020011AC4202"},
    ]
    client.info_random_node.side_effect = lambda command, *a, **kw: INFO_RESPONSES.get(command, "")
    client.query.side_effect = lambda ns, set_name: FakeQuery(scan_results)
    return client


@pytest.fixture
def client_factory(mock_aerospike_client):
    """Factory passed to ClusterClient; records the config it was called with."""
    factory = MagicMock(return_value=mock_aerospike_client)
    return factory


@pytest.fixture
def cluster_client(client_factory):
    """A ClusterClient connected to the mock Aerospike client."""
    from app.database.cluster import ClusterClient

    cluster = ClusterClient(timeout_ms=1000, client_factory=client_factory)
    cluster.connect("127.0.0.1", 3000)
    return cluster


@pytest.fixture
def settings():
    """Settings with test defaults."""
    from app.config import Settings

    return Settings(scan_max_records=100, search_max_results=100, search_scan_multiplier=10)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mock_cluster_service():
    """
    Create a fully mocked ClusterService.

    All methods are AsyncMock, allowing you to configure return values:

        mock_cluster_service.list_namespaces.return_value = [...]
    """
    service = MagicMock()
    service.connect = AsyncMock()
    service.disconnect = AsyncMock()
    service.get_connection_info = AsyncMock()
    service.list_namespaces = AsyncMock()
    service.list_sets = AsyncMock()
    service.get_namespace_stats = AsyncMock()
    return service


@pytest.fixture
def mock_record_service():
    """Create a fully mocked RecordService."""
    service = MagicMock()
    service.scan = AsyncMock()
    service.search = AsyncMock()
    service.get_record = AsyncMock()
    service.put_record = AsyncMock()
    service.delete_record = AsyncMock()
    return service


@pytest.fixture
def override_cluster_service(app, mock_cluster_service):
    """Route ClusterService injection to the mock."""
    from app.dependencies.services import get_cluster_service

    app.dependency_overrides[get_cluster_service] = lambda: mock_cluster_service
    return mock_cluster_service


@pytest.fixture
def override_record_service(app, mock_record_service):
    """Route RecordService injection to the mock."""
    from app.dependencies.services import get_record_service

    app.dependency_overrides[get_record_service] = lambda: mock_record_service
    return mock_record_service


@pytest.fixture
def override_profile_service(app, mock_async_redis):
    """Route ProfileService injection to a real service on fakeredis."""
    from app.dependencies.services import get_profile_service
    from app.services.profile_service import ProfileService

    service = ProfileService(mock_async_redis)
    app.dependency_overrides[get_profile_service] = lambda: service
    return service


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code, response.text
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in str(data["detail"]).lower()
    return _assert
