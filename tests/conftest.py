# tests/conftest.py
import pytest

from core.store import db
from models.habit import Habit


@pytest.fixture(autouse=True)
def reset_store():
    db.clear()
    yield
    db.clear()


@pytest.fixture
def make_habit():
    """Factory for Habit records with sensible defaults."""
    def _make(**overrides):
        fields = {"title": "Morning Run", "category": "health"}
        fields.update(overrides)
        return Habit(**fields)
    return _make
