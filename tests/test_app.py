from fastapi.testclient import TestClient
from storeweb.app import create_app
from storeweb.config import Settings
from storeweb.registry import Registry
from storeweb.stores import InProcStore
from fakes import BrokenStore

def test_store_list_with_and_without_slash(client):
    a = client.get("/store_web")
    b = client.get("/store_web/")
    assert a.status_code == b.status_code == 200
    assert a.text == b.text
    assert '<p><a href="/store_web/users">users</a></p>' in a.text
    assert a.headers["content-type"].startswith("text/html")

def test_key_list(client):
    r = client.get("/store_web/users")
    assert r.status_code == 200
    assert '<p><a href="/store_web/users/alice">alice</a></p>' in r.text

def test_empty_store_lists_nothing(client):
    r = client.get("/store_web/empty")
    assert r.status_code == 200 and r.text == ""

def test_value_fetch(client):
    r = client.get("/store_web/users/a")
    assert r.status_code == 200 and r.content == b"b"
    assert client.get("/store_web/users/missing").status_code == 404

def test_unregistered_is_not_found(client):
    assert client.get("/store_web/nope").status_code == 404
    assert client.get("/store_web/nope/a").status_code == 404

def test_malformed_paths_are_not_found(client):
    for p in ["/store_web/users/a/extra", "/store_web//a", "/store_webx"]:
        assert client.get(p).status_code == 404, p

def test_iteration_failure_is_not_found_without_partial_body(registry, client):
    registry.register("broken", BrokenStore())
    r = client.get("/store_web/broken")
    assert r.status_code == 404
    assert "first" not in r.text
    assert client.get("/store_web/broken/first").status_code == 404

def test_listed_keys_are_fetchable(client):
    r = client.get("/store_web/users")
    hrefs = [part.split('"')[0] for part in r.text.split('href="')[1:]]
    assert hrefs
    for h in hrefs:
        assert client.get(h).status_code == 200

def test_escaped_key_round_trip():
    r = Registry()
    r.register("db", InProcStore({b"a b&c": b"spaced"}))
    c = TestClient(create_app(r, Settings()))
    listing = c.get("/store_web/db").text
    assert 'href="/store_web/db/a%20b%26c"' in listing
    assert c.get("/store_web/db/a%20b%26c").content == b"spaced"

def test_registration_after_app_creation_is_visible(registry, client):
    registry.register("late", InProcStore({b"x": b"y"}))
    assert "late" in client.get("/store_web").text
    assert client.get("/store_web/late/x").content == b"y"

def test_health_and_custom_mount():
    r = Registry()
    r.register("db", InProcStore())
    c = TestClient(create_app(r, Settings(mount="dbs/", health_path="/ping")))
    assert c.get("/ping").text == "hello world"
    assert '<p><a href="/dbs/db">db</a></p>' in c.get("/dbs").text
    assert c.get("/store_web").status_code == 404

def test_only_get(client):
    assert client.post("/store_web/users/a").status_code == 405

def test_double_slash_is_store_list(client):
    a = client.get("/store_web")
    b = client.get("/store_web//")
    assert b.status_code == 200 and b.text == a.text

def test_settings_default_to_environment(monkeypatch):
    monkeypatch.setenv("STORE_WEB_MOUNT", "/kv")
    r = Registry()
    r.register("db", InProcStore())
    c = TestClient(create_app(r))
    assert '<p><a href="/kv/db">db</a></p>' in c.get("/kv").text
    assert c.get("/store_web").status_code == 404
