import itertools

import pytest

import app as web
from people.registry import PersonRegistry


@pytest.fixture
def registry():
    counter = itertools.count(1)
    return PersonRegistry(id_factory=lambda: f"_p{next(counter)}")


@pytest.fixture
def client():
    web.app.config["TESTING"] = True
    web.SESSION_CONTEXTS.clear()
    yield web.app.test_client()
    web.SESSION_CONTEXTS.clear()
