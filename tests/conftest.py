"""Pytest configuration and shared fixtures."""
import logging
import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from hospital_factory.services.factories import CapitalHospitalFactory, FieldHospitalFactory

FIELD_BUILDING = "Будівля: Намет/тимчасова споруда для польового госпіталю (Field)."
FIELD_STAFF = "Персонал: Польові хірурги та медсестри (швидке розгортання) (Field)."
FIELD_INTERACTION = f"Персонал польового госпіталю працює в умовах: ({FIELD_BUILDING})"

CAPITAL_BUILDING = "Будівля: Багатоповерхова капітальна будівля з відділеннями (Capital)."
CAPITAL_STAFF = "Персонал: Вузькоспеціалізовані лікарі та постійний медперсонал (Capital)."
CAPITAL_INTERACTION = f"Персонал капітальної лікарні працює в умовах: ({CAPITAL_BUILDING})"


@pytest.fixture
def field_factory():
    """Factory for the Field family."""
    return FieldHospitalFactory()


@pytest.fixture
def capital_factory():
    """Factory for the Capital family."""
    return CapitalHospitalFactory()


@pytest.fixture(params=["field", "capital"])
def any_factory(request):
    """Each concrete factory in turn."""
    factories = {"field": FieldHospitalFactory, "capital": CapitalHospitalFactory}
    return factories[request.param]()


@pytest.fixture
def test_client():
    """FastAPI test client."""
    # Import inside the fixture so settings are read with the test environment
    from main import app
    return TestClient(app)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() calls so handlers never outlive a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def expected():
    """Fixed descriptions per family tag."""
    return {
        "field": {
            "building": FIELD_BUILDING,
            "staff": FIELD_STAFF,
            "interaction": FIELD_INTERACTION,
        },
        "capital": {
            "building": CAPITAL_BUILDING,
            "staff": CAPITAL_STAFF,
            "interaction": CAPITAL_INTERACTION,
        },
    }
