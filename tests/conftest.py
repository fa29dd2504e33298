"""
Shared pytest fixtures — fresh in‑memory store + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from receipt_processor.main import app
from receipt_processor.store import ReceiptStore, get_store


@pytest.fixture()
def store():
    return ReceiptStore()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
