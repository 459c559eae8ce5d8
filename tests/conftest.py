import pytest
from fastapi.testclient import TestClient
from app.main import create_app
from app.storage import Storage


@pytest.fixture
def storage():
    store = Storage(url="sqlite://", seed=True)
    yield store
    store.dispose()


@pytest.fixture
def empty_storage():
    store = Storage(url="sqlite://", seed=False)
    yield store
    store.dispose()


@pytest.fixture
def db(empty_storage):
    with empty_storage.session() as session:
        yield session


@pytest.fixture
def client(storage):
    with TestClient(create_app(storage)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(empty_storage):
    with TestClient(create_app(empty_storage)) as test_client:
        yield test_client
