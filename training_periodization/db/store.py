"""Persistence adapter for generated macrocycles."""

import json
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..planning.models import SaveResult
from .database import Database, get_db
from .models import MacroCycleRecord

logger = logging.getLogger(__name__)


class MacroCycleStore:
    """Stores flat macrocycle records in the ``macrocycles`` table."""

    def __init__(self, database: Optional[Database] = None, database_url: Optional[str] = None):
        self._db = database
        self.database_url = database_url

    @property
    def db(self) -> Database:
        if self._db is None:
            self._db = get_db(self.database_url)
        return self._db

    def save(self, record: Dict[str, Any]) -> SaveResult:
        """Insert one macrocycle record.

        Database errors, including failing to open the database, and malformed
        records are reported in the result rather than raised; nothing is
        retried here.
        """
        try:
            row = self._to_row(record)
            with self.db.get_session() as session:
                session.add(row)
        except (SQLAlchemyError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error saving macrocycle {record.get('id')}: {e}")
            return SaveResult(ok=False, cause=str(e))

        logger.info(f"Saved macrocycle {record['id']} for user {record['user_id']}")
        return SaveResult(ok=True)

    def load(self, macro_cycle_id: str) -> Optional[Dict[str, Any]]:
        with self.db.get_session() as session:
            row = session.get(MacroCycleRecord, macro_cycle_id)
            return row.to_record() if row is not None else None

    def list_for_user(self, user_id: str, active_only: bool = False) -> List[Dict[str, Any]]:
        with self.db.get_session() as session:
            query = session.query(MacroCycleRecord).filter(MacroCycleRecord.user_id == user_id)
            if active_only:
                query = query.filter(MacroCycleRecord.is_active.is_(True))
            rows = query.order_by(MacroCycleRecord.start_date).all()
            return [row.to_record() for row in rows]

    def _to_row(self, record: Dict[str, Any]) -> MacroCycleRecord:
        values = dict(record)
        for column in MacroCycleRecord.JSON_COLUMNS:
            values[column] = json.dumps(values.get(column))
        values["start_date"] = date.fromisoformat(values["start_date"])
        values["end_date"] = date.fromisoformat(values["end_date"])
        values["created_at"] = datetime.fromisoformat(values["created_at"])
        values["updated_at"] = datetime.fromisoformat(values["updated_at"])
        return MacroCycleRecord(**values)
