"""Core test fixtures for storage and API tests."""

import pytest
from fastapi.testclient import TestClient

from core.pokeapi_client import PokeApiError, get_pokeapi_client
from main import app
from storage import Storage
from tests.factories import create_pokemon


class FakePokeApiClient:
    """Stands in for PokeAPI: builds a Pokemon for any id except the configured failures."""

    def __init__(self):
        self.calls = []
        self.failures = {}

    def fail(self, pokeapi_id: int, status_code=None):
        self.failures[pokeapi_id] = status_code

    def get_pokemon(self, pokeapi_id: int):
        self.calls.append(pokeapi_id)
        if pokeapi_id in self.failures:
            status_code = self.failures[pokeapi_id]
            raise PokeApiError(f"GET pokemon/{pokeapi_id} failed", status_code=status_code)
        return create_pokemon(pokeapi_id)


@pytest.fixture
def storage() -> Storage:
    """Small storage: party of 2, boxes of 3."""
    return Storage(max_party_size=2, max_box_size=3)


@pytest.fixture
def pokeapi() -> FakePokeApiClient:
    return FakePokeApiClient()


@pytest.fixture
def client(pokeapi):
    """API client with a fresh storage per test and PokeAPI stubbed out."""
    app.dependency_overrides[get_pokeapi_client] = lambda: pokeapi
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
