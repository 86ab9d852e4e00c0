"""
Store error hierarchy.

Services raise these; the application-level handler in ``app.main`` turns
them into HTTP responses carrying a single human-readable ``detail`` message.
"""
from fastapi import status


class StoreError(Exception):
    """Base class for failures talking to the Aerospike cluster."""

    status_code: int = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotConnectedError(StoreError):
    """Raised when an operation needs a cluster connection and there is none."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "Not connected to Aerospike. Please connect first."):
        super().__init__(message)


class ClusterConnectionError(StoreError):
    """Raised when connecting to (or disconnecting from) a cluster fails."""


class RecordNotFoundError(StoreError):
    """Raised when a record addressed by key does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreOperationError(StoreError):
    """Raised when the client reports a failure for a scan, query or write."""


class InvalidKeyError(StoreError):
    """Raised when a key string cannot be converted to its declared key type."""

    status_code = status.HTTP_400_BAD_REQUEST
