"""Storage module for VHSA database operations."""
from .database import get_db, init_db, dispose_engine

__all__ = [
    "get_db",
    "init_db",
    "dispose_engine",
]
