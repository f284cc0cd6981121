"""Database module for the training periodization tool."""

from .database import Database, get_db
from .models import MacroCycleRecord
from .store import MacroCycleStore

__all__ = ["Database", "get_db", "MacroCycleRecord", "MacroCycleStore"]
