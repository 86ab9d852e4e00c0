"""
Aerospike cluster client.

Thin wrapper around the native ``aerospike`` client: opens and closes the
connection, parses info responses into namespace/set models and converts
record tuples to ``Record`` models. All calls block; the services run them
in FastAPI's threadpool.
"""
import base64
import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import aerospike
from aerospike import exception as aerospike_exception

from app.core.exceptions import (
    ClusterConnectionError,
    InvalidKeyError,
    NotConnectedError,
    RecordNotFoundError,
    StoreOperationError,
)
from app.core.matching import key_matches
from app.models.cluster import ConnectionInfo, NamespaceInfo, NodeInfo, SetInfo
from app.models.record import KeyType, MatchType, Record

logger = logging.getLogger(__name__)

# TTL reported by the client for records that never expire
TTL_NEVER_EXPIRE = 0xFFFFFFFF


# ==================== Info parsing ====================


def strip_info_command(response: Optional[str]) -> str:
    """Drop the echoed command ("namespaces\\t...") from an info response."""
    if not response:
        return ""
    if "\t" in response:
        response = response.split("\t", 1)[1]
    return response.strip()


def parse_info_pairs(text: str, separator: str = ";") -> dict[str, str]:
    """Parse "k1=v1;k2=v2" into a dict, skipping fragments without '='."""
    pairs: dict[str, str] = {}
    for part in text.split(separator):
        if "=" not in part:
            continue
        key, value = part.split("=", 1)
        pairs[key.strip()] = value.strip()
    return pairs


def parse_int(value: Any) -> Optional[int]:
    """Parse an info value as int, None when missing or not numeric."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _first_int(data: dict[str, str], *names: str) -> Optional[int]:
    for name in names:
        parsed = parse_int(data.get(name))
        if parsed is not None:
            return parsed
    return None


def parse_namespace_info(name: str, response: Optional[str]) -> NamespaceInfo:
    """Build a NamespaceInfo from a "namespace/<ns>" info response."""
    config = parse_info_pairs(strip_info_command(response), ";")
    return NamespaceInfo(
        name=name,
        master_objects=_first_int(config, "master_objects", "master-objects", "objects") or 0,
        replication_factor=_first_int(
            config, "effective_replication_factor", "replication-factor", "replication_factor"
        ),
        storage_engine=config.get("storage-engine"),
        config=config,
    )


def parse_sets_info(namespace: str, response: Optional[str]) -> list[SetInfo]:
    """Build SetInfo entries from a "sets/<ns>" info response."""
    sets: list[SetInfo] = []
    for entry in strip_info_command(response).split(";"):
        if not entry:
            continue
        data = parse_info_pairs(entry, ":")
        set_name = data.get("set") or data.get("set_name")
        if not set_name:
            continue
        sets.append(SetInfo(
            namespace=namespace,
            set_name=set_name,
            object_count=_first_int(data, "objects", "n_objects") or 0,
            memory_data_bytes=_first_int(data, "memory_data_bytes") or 0,
            device_data_bytes=_first_int(data, "device_data_bytes", "data_used_bytes") or 0,
        ))
    return sets


# ==================== Key / value conversion ====================


def build_key(namespace: str, set_name: Optional[str], key: str, key_type: KeyType | str) -> tuple:
    """Turn a string key back into the client's key tuple."""
    key_type = KeyType(key_type)
    try:
        if key_type == KeyType.INTEGER:
            return (namespace, set_name, int(key))
        if key_type == KeyType.BYTES:
            return (namespace, set_name, bytearray.fromhex(key))
        if key_type == KeyType.DIGEST:
            return (namespace, set_name, None, bytearray.fromhex(key))
    except ValueError as e:
        raise InvalidKeyError(f"Key '{key}' is not a valid {key_type.value} key") from e
    return (namespace, set_name, key)


def render_key(key_tuple: tuple) -> tuple[str, KeyType]:
    """Return (key string, key type) for a key tuple returned by the client."""
    user_key = key_tuple[2] if len(key_tuple) > 2 else None
    if user_key is None:
        digest = key_tuple[3] if len(key_tuple) > 3 else None
        return (bytes(digest).hex() if digest is not None else ""), KeyType.DIGEST
    if isinstance(user_key, bool):
        return str(user_key), KeyType.STRING
    if isinstance(user_key, int):
        return str(user_key), KeyType.INTEGER
    if isinstance(user_key, (bytes, bytearray)):
        return bytes(user_key).hex(), KeyType.BYTES
    return str(user_key), KeyType.STRING


def to_json_safe(value: Any) -> Any:
    """Convert a bin value into something the JSON encoder accepts."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {str(k): to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(v) for v in value]
    return str(value)


def expiration_from_ttl(ttl: Optional[int], now: Optional[datetime] = None) -> Optional[str]:
    """ISO expiration timestamp for a remaining TTL, None when it never expires."""
    if ttl is None or ttl < 0 or ttl >= TTL_NEVER_EXPIRE:
        return None
    now = now or datetime.now(timezone.utc)
    return (now + timedelta(seconds=ttl)).isoformat()


def record_from_result(result: tuple) -> Record:
    """Convert a (key, meta, bins) tuple from the client to a Record."""
    key_tuple, meta, bins = result
    meta = meta or {}
    key, key_type = render_key(key_tuple)
    ttl = meta.get("ttl")
    if ttl is not None and (ttl < 0 or ttl >= TTL_NEVER_EXPIRE):
        ttl = -1
    return Record(
        namespace=key_tuple[0],
        set_name=key_tuple[1],
        key=key,
        key_type=key_type,
        bins={name: to_json_safe(value) for name, value in (bins or {}).items()},
        ttl=ttl,
        generation=meta.get("gen"),
        expiration=expiration_from_ttl(ttl),
    )


# ==================== Client ====================


class ClusterClient:
    """
    Holds at most one open Aerospike client.

    Connecting again closes the previous client first, so a console always
    talks to a single cluster.
    """

    def __init__(
        self,
        timeout_ms: int = 5000,
        client_factory: Callable[[dict], Any] = aerospike.client,
    ):
        self._timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client = None
        self._host: Optional[str] = None
        self._port: Optional[int] = None
        self._lock = threading.Lock()

    # ==================== Connection ====================

    @property
    def is_connected(self) -> bool:
        client = self._client
        return client is not None and client.is_connected()

    def connect(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> ConnectionInfo:
        """Open a connection, replacing any existing one."""
        config: dict[str, Any] = {
            "hosts": [(host, port)],
            "policies": {
                "read": {"total_timeout": self._timeout_ms},
                "write": {"total_timeout": self._timeout_ms},
            },
        }
        if username and password:
            config["user"] = username
            config["password"] = password

        with self._lock:
            self._close_locked()
            try:
                client = self._client_factory(config)
                if not client.is_connected():
                    if username and password:
                        client.connect(username, password)
                    else:
                        client.connect()
            except aerospike_exception.AerospikeError as e:
                logger.error(f"Failed to connect to Aerospike at {host}:{port}: {e}")
                raise ClusterConnectionError(f"Connection failed: {e}") from e
            self._client = client
            self._host = host
            self._port = port

        logger.info(f"Connected to Aerospike at {host}:{port}")
        return self.connection_info()

    def close(self) -> None:
        """Close the current connection, if any."""
        with self._lock:
            self._close_locked()

    def _close_locked(self) -> None:
        if self._client is None:
            return
        try:
            self._client.close()
        except aerospike_exception.AerospikeError as e:
            logger.warning(f"Error while closing Aerospike client: {e}")
        logger.info(f"Disconnected from Aerospike at {self._host}:{self._port}")
        self._client = None
        self._host = None
        self._port = None

    def _require(self):
        client = self._client
        if client is None or not client.is_connected():
            raise NotConnectedError()
        return client

    def connection_info(self) -> ConnectionInfo:
        """Describe the current connection and its nodes."""
        if not self.is_connected:
            return ConnectionInfo(connected=False, message="Not connected")

        client = self._client
        try:
            nodes = [
                NodeInfo(
                    name=node["node_name"],
                    address=f"{node['address']}:{node['port']}",
                    active=True,
                )
                for node in client.get_node_names()
            ]
            cluster_name = strip_info_command(client.info_random_node("cluster-name"))
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to get connection info: {e}")
            return ConnectionInfo(
                connected=False,
                message=f"Error retrieving connection info: {e}",
            )

        if not cluster_name or cluster_name == "null":
            cluster_name = nodes[0].name if nodes else "Aerospike Cluster"

        return ConnectionInfo(
            connected=True,
            cluster_name=cluster_name,
            nodes=nodes,
            message="Connected successfully",
        )

    # ==================== Namespaces & Sets ====================

    def namespaces(self) -> list[NamespaceInfo]:
        """List namespaces with their headline statistics."""
        client = self._require()
        try:
            names = strip_info_command(client.info_random_node("namespaces"))
            return [
                parse_namespace_info(name, client.info_random_node(f"namespace/{name}"))
                for name in names.split(";")
                if name
            ]
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to get namespaces: {e}")
            raise StoreOperationError(f"Failed to get namespaces: {e}") from e

    def sets(self, namespace: str) -> list[SetInfo]:
        """List the sets of a namespace."""
        client = self._require()
        try:
            return parse_sets_info(namespace, client.info_random_node(f"sets/{namespace}"))
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to get sets for namespace {namespace}: {e}")
            raise StoreOperationError(f"Failed to get sets: {e}") from e

    # ==================== Records ====================

    def _foreach(self, namespace: str, set_name: Optional[str], callback: Callable) -> None:
        client = self._require()
        query = client.query(namespace, set_name)
        query.foreach(callback)

    def scan(self, namespace: str, set_name: Optional[str], max_records: int = 0) -> list[Record]:
        """
        Scan a set.

        Args:
            namespace: Namespace to scan
            set_name: Set to scan
            max_records: Stop after this many records (0 = no limit)
        """
        records: list[Record] = []

        def collect(result):
            records.append(record_from_result(result))
            if max_records and len(records) >= max_records:
                return False

        try:
            self._foreach(namespace, set_name, collect)
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to scan records from {namespace}.{set_name}: {e}")
            raise StoreOperationError(f"Failed to scan records: {e}") from e
        return records

    def search(
        self,
        namespace: str,
        set_name: Optional[str],
        pattern: str,
        match_type: MatchType,
        max_results: int,
        scan_limit: int = 0,
    ) -> list[Record]:
        """
        Scan a set and keep records whose key matches the pattern.

        Args:
            pattern: Pattern compared against the string form of each key
            match_type: EXACT, PREFIX, SUFFIX or CONTAINS
            max_results: Stop once this many records matched
            scan_limit: Stop after scanning this many records (0 = no limit)
        """
        matched: list[Record] = []
        scanned = 0

        def collect(result):
            nonlocal scanned
            scanned += 1
            key, _ = render_key(result[0])
            if key_matches(key, pattern, match_type):
                matched.append(record_from_result(result))
            if len(matched) >= max_results or (scan_limit and scanned >= scan_limit):
                return False

        try:
            self._foreach(namespace, set_name, collect)
        except aerospike_exception.AerospikeError as e:
            logger.error(
                f"Failed to search records from {namespace}.{set_name} with pattern {pattern}: {e}"
            )
            raise StoreOperationError(f"Failed to search records: {e}") from e
        return matched

    def get(
        self,
        namespace: str,
        set_name: Optional[str],
        key: str,
        key_type: KeyType | str = KeyType.STRING,
    ) -> Record:
        """Read one record; raises RecordNotFoundError when it does not exist."""
        client = self._require()
        as_key = build_key(namespace, set_name, key, key_type)
        try:
            _, meta, bins = client.get(as_key)
        except aerospike_exception.RecordNotFound as e:
            raise RecordNotFoundError(f"Record '{key}' not found in {namespace}.{set_name}") from e
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to get record {namespace}.{set_name}.{key}: {e}")
            raise StoreOperationError(f"Failed to get record: {e}") from e

        # The returned key tuple may omit the user key; keep the one we asked for
        record = record_from_result(((namespace, set_name, None, None), meta, bins))
        record.key = key
        record.key_type = KeyType(key_type).value
        return record

    def put(
        self,
        namespace: str,
        set_name: Optional[str],
        key: str,
        bins: dict[str, Any],
        ttl: Optional[int] = None,
        key_type: KeyType | str = KeyType.STRING,
    ) -> Record:
        """Upsert a record and return it as stored."""
        client = self._require()
        as_key = build_key(namespace, set_name, key, key_type)
        meta = {"ttl": ttl} if ttl is not None else {}
        try:
            client.put(as_key, bins, meta=meta, policy={"key": aerospike.POLICY_KEY_SEND})
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to put record {namespace}.{set_name}.{key}: {e}")
            raise StoreOperationError(f"Failed to put record: {e}") from e
        return self.get(namespace, set_name, key, key_type)

    def delete(
        self,
        namespace: str,
        set_name: Optional[str],
        key: str,
        key_type: KeyType | str = KeyType.STRING,
    ) -> bool:
        """Delete a record; returns False when it did not exist."""
        client = self._require()
        as_key = build_key(namespace, set_name, key, key_type)
        try:
            client.remove(as_key)
        except aerospike_exception.RecordNotFound:
            return False
        except aerospike_exception.AerospikeError as e:
            logger.error(f"Failed to delete record {namespace}.{set_name}.{key}: {e}")
            raise StoreOperationError(f"Failed to delete record: {e}") from e
        return True
