"""Tests for macrocycle persistence."""

import os
import shutil
import tempfile
from datetime import datetime

from training_periodization.config import config
from training_periodization.db import Database, MacroCycleStore
from training_periodization.planning import (
    MacroCycle,
    MacroCycleBuilder,
    PlanCreationFailure,
    create_macro_cycle,
)
from training_periodization.planning.models import SaveResult


REQUEST = dict(
    user_id="athlete-7",
    name="Off-season Strength",
    primary_goal="strength",
    training_level="intermediate",
    frequency=4,
    duration_months=3,
    start_date="2024-01-01",
    secondary_goals=["hypertrophy"],
    target_muscle_groups=["legs", "back"],
)


class FailingStore:
    """Store stub that rejects every record."""

    def __init__(self):
        self.records = []

    def save(self, record):
        self.records.append(record)
        return SaveResult(ok=False, cause="connection refused")


class TestMacroCycleStore:
    """Test the SQLAlchemy-backed store."""

    def setup_method(self):
        """Set up an in-memory database."""
        self.db = Database("sqlite:///:memory:")
        self.db.create_tables()
        self.store = MacroCycleStore(self.db)
        self.builder = MacroCycleBuilder(
            store=self.store, clock=lambda: datetime(2024, 1, 1, 8, 0)
        )

    def teardown_method(self):
        """Close the database."""
        self.db.close()

    def test_round_trip(self):
        """A stored plan loads back as the same flat record."""
        plan = self.builder.create_macro_cycle(**REQUEST)

        assert isinstance(plan, MacroCycle)
        loaded = self.store.load(plan.id)
        assert loaded == plan.to_record()
        assert loaded['secondary_goals'] == ['hypertrophy']
        assert loaded['start_date'] == '2024-01-01'
        assert loaded['deload_schedule']['frequency'] == 5
        assert len(loaded['meso_cycles']) == len(plan.meso_cycles)

    def test_load_missing(self):
        """Unknown ids load as None."""
        assert self.store.load("does-not-exist") is None

    def test_list_for_user(self):
        """Plans are listed per user in start order."""
        later = dict(REQUEST, start_date="2024-06-01", name="Summer Block")
        self.builder.create_macro_cycle(**later)
        self.builder.create_macro_cycle(**REQUEST)
        self.builder.create_macro_cycle(**dict(REQUEST, user_id="someone-else"))

        records = self.store.list_for_user("athlete-7")
        assert [r['name'] for r in records] == ["Off-season Strength", "Summer Block"]
        assert all(r['is_active'] for r in records)
        assert self.store.list_for_user("athlete-7", active_only=True) == records
        assert self.store.list_for_user("nobody") == []

    def test_duplicate_id_reports_failure(self):
        """A database error is returned as a failure, not raised."""
        builder = MacroCycleBuilder(store=self.store, id_factory=lambda: "same-id")

        assert isinstance(builder.create_macro_cycle(**REQUEST), MacroCycle)
        result = builder.create_macro_cycle(**REQUEST)

        assert isinstance(result, PlanCreationFailure)
        assert not result
        assert result.macro_cycle_id == "same-id"
        assert result.cause
        assert len(self.store.list_for_user("athlete-7")) == 1

    def test_save_result(self):
        """Saving a record directly reports success."""
        plan = self.builder.build(**REQUEST)
        result = self.store.save(plan.to_record())

        assert result.ok
        assert result.cause is None


class TestPlanCreationFailure:
    """Test failures surfaced by the store."""

    def test_rejected_save(self):
        """A rejected save yields PlanCreationFailure and no plan."""
        store = FailingStore()
        result = create_macro_cycle(store=store, **REQUEST)

        assert isinstance(result, PlanCreationFailure)
        assert result.cause == "connection refused"
        assert result.macro_cycle_id == store.records[0]['id']

    def test_build_does_not_touch_store(self):
        """Building alone never saves."""
        store = FailingStore()
        MacroCycleBuilder(store=store).build(**REQUEST)
        assert store.records == []


class TestUnavailableDatabase:
    """Failing to open the database is a persistence failure, not an exception."""

    def setup_method(self):
        """Point at a database file inside a directory that does not exist."""
        self.tmpdir = tempfile.mkdtemp()
        path = os.path.join(self.tmpdir, "missing", "plans.db")
        self.database_url = f"sqlite:///{path}"

    def teardown_method(self):
        """Remove the temporary directory."""
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_store_with_unopenable_url(self):
        """Saving to an unopenable database returns a failed SaveResult."""
        store = MacroCycleStore(database_url=self.database_url)
        plan = MacroCycleBuilder().build(**REQUEST)

        result = store.save(plan.to_record())

        assert not result.ok
        assert "unable to open database file" in result.cause

    def test_builder_default_store(self, monkeypatch):
        """The builder's default store reports an unopenable DATABASE_URL as a failure."""
        monkeypatch.setattr(config, "DATABASE_URL", self.database_url)

        result = MacroCycleBuilder().create_macro_cycle(**REQUEST)

        assert isinstance(result, PlanCreationFailure)
        assert result.macro_cycle_id
        assert not os.path.exists(os.path.join(self.tmpdir, "missing"))

    def test_malformed_record(self):
        """A record missing required fields is rejected without raising."""
        db = Database("sqlite:///:memory:")
        db.create_tables()
        try:
            result = MacroCycleStore(db).save({'id': 'broken', 'user_id': 'athlete-7'})
        finally:
            db.close()

        assert not result.ok
        assert 'start_date' in result.cause
