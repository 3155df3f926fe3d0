import pytest
from fastapi.testclient import TestClient

from transactions_api.app.core.config import settings
from transactions_api.app.core.db import ProductStore
from transactions_api.app.main import create_app


def make_product(product_id, **fields):
    item = {
        "id": product_id,
        "title": f"Product {product_id}",
        "price": 10.0,
        "description": "Plain item",
        "category": "misc",
        "image": f"https://example.com/{product_id}.jpg",
        "sold": 0,
        "dateOfSale": "2021-03-15T10:00:00+05:30",
    }
    item.update(fields)
    return item


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "products.db"))
    monkeypatch.setattr(settings, "seed_on_startup", False)
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def store(client) -> ProductStore:
    return client.app.state.store


@pytest.fixture
def add_product(store):
    def _add(product_id, **fields):
        item = make_product(product_id, **fields)
        store.insert_product(item)
        return item

    return _add


@pytest.fixture
def memory_store():
    s = ProductStore.open(":memory:")
    s.init_db()
    yield s
    s.close()
