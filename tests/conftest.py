import pytest
from fastapi.testclient import TestClient
from storeweb.app import create_app
from storeweb.config import Settings
from storeweb.registry import Registry
from storeweb.stores import InProcStore

@pytest.fixture
def registry():
    r = Registry()
    r.register("users", InProcStore({b"a": b"b", b"alice": b'{"id": 1}'}))
    r.register("empty", InProcStore())
    return r

@pytest.fixture
def client(registry):
    return TestClient(create_app(registry, Settings(mount="/store_web")))
