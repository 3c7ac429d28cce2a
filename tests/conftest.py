import pytest
from fastapi.testclient import TestClient

from wordle_api.db import DictionaryStore
from wordle_api.game import GameStore
from wordle_api.identity import ClientIdentifier
from wordle_api.main import create_app


@pytest.fixture()
def dictionary(tmp_path):
    store = DictionaryStore(f"sqlite:///{tmp_path / 'dictionary.db'}")
    store.init_db()
    return store


@pytest.fixture()
def games():
    return GameStore()


@pytest.fixture()
def identifier():
    return ClientIdentifier("test-secret")


@pytest.fixture()
def app(dictionary, games, identifier):
    return create_app(dictionary=dictionary, games=games, identifier=identifier, seed_path=None)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
