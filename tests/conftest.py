"""Shared fixtures for the family tree tests."""

import pytest
from fastapi.testclient import TestClient

from app.db.storage import InMemoryRepository
from app.main import app
from app.models.person_model import Person
from app.utils.deps import get_repository


def make_person(id="test-id", name="Test Person", dateOfBirth="1990-01-01", parentIds=None, **kwargs):
    """Build a Person with sensible defaults; override any field by keyword."""
    return Person(id=id, name=name, dateOfBirth=dateOfBirth, parentIds=parentIds or [], **kwargs)


@pytest.fixture
def chain():
    """Grandparent <- parent <- child."""
    grandparent = make_person(id="grandparent", name="Grace", dateOfBirth="1930-01-01")
    parent = make_person(id="parent", name="Paul", dateOfBirth="1960-01-01", parentIds=["grandparent"])
    child = make_person(id="child", name="Chris", dateOfBirth="1990-01-01", parentIds=["parent"])
    return grandparent, parent, child


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def client(repo):
    """Test client backed by an in-memory repository (lifespan not run)."""
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
