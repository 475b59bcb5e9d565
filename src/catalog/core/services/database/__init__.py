"""Database engine, sessions and schema management."""

from .db_manage import DbManageService
from .db_session import DbSessionService, build_engine

__all__ = ["DbManageService", "DbSessionService", "build_engine"]
