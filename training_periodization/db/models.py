"""Database models for stored training plans."""

import json
from datetime import datetime
from typing import Any, Dict
from sqlalchemy import Column, Integer, String, DateTime, Date, Boolean, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class MacroCycleRecord(Base):
    """A generated macrocycle, one row per plan."""

    __tablename__ = "macrocycles"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(50), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    duration = Column(Integer, nullable=False)  # months
    periodization_type = Column(String(50), default="block")
    primary_goal = Column(String(50), nullable=False)
    secondary_goals = Column(Text)  # JSON list
    training_level = Column(String(50), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    is_active = Column(Boolean, default=True)
    training_frequency = Column(Integer, nullable=False)  # days/week
    target_muscle_groups = Column(Text)  # JSON list
    deload_schedule = Column(Text)  # JSON object
    nutrition_periodization = Column(Text)  # JSON object
    meso_cycles = Column(Text)  # JSON list of mesocycles with their microcycles
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    JSON_COLUMNS = (
        "secondary_goals",
        "target_muscle_groups",
        "deload_schedule",
        "nutrition_periodization",
        "meso_cycles",
    )

    def to_record(self) -> Dict[str, Any]:
        """Return the flat record with JSON columns decoded and dates as ISO strings."""
        record: Dict[str, Any] = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if column.name in self.JSON_COLUMNS:
                value = json.loads(value) if value else None
            elif hasattr(value, "isoformat"):
                value = value.isoformat()
            record[column.name] = value
        return record

    def __repr__(self):
        return (f"<MacroCycleRecord(id={self.id}, user_id={self.user_id}, "
                f"goal={self.primary_goal}, start={self.start_date})>")
