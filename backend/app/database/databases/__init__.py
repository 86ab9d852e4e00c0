"""
Store layout definitions and key constants.
"""
from app.database.databases import preferences_db

__all__ = ["preferences_db"]
