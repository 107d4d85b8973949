import pytest
from fastapi.testclient import TestClient

from wiki.core.store import PageStore
from wiki.main import create_app


@pytest.fixture
def store(tmp_path):
    store = PageStore.from_url(f"sqlite:///{tmp_path / 'db' / 'wiki.sqlite3'}", pool_size=4)
    store.ensure_schema()
    yield store
    store.close()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store), follow_redirects=False) as c:
        yield c
