"""
API Routers module.
"""
from app.routers import connection, health, namespaces, profiles, records

__all__ = ["connection", "health", "namespaces", "profiles", "records"]
