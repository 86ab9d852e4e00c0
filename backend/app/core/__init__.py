"""
Core module - Error types and key matching utilities.
"""
from app.core.exceptions import (
    StoreError,
    NotConnectedError,
    ClusterConnectionError,
    RecordNotFoundError,
    StoreOperationError,
    InvalidKeyError,
)
from app.core.matching import key_matches

__all__ = [
    "StoreError",
    "NotConnectedError",
    "ClusterConnectionError",
    "RecordNotFoundError",
    "StoreOperationError",
    "InvalidKeyError",
    "key_matches",
]
