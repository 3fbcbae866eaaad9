import pytest
from storeweb.paths import Malformed, NoSegments, OneSegment, TwoSegments, normalize_mount, parse_path

M = "/store_web"

@pytest.mark.parametrize("path,expected", [
    ("/store_web", NoSegments()),
    ("/store_web/", NoSegments()),
    ("/store_web//", NoSegments()),
    ("/store_web///", NoSegments()),
    ("/store_web/db", OneSegment("db")),
    ("/store_web/db/", OneSegment("db")),
    ("/store_web/db/a", TwoSegments("db", "a")),
    ("/store_web/db/a.b-c", TwoSegments("db", "a.b-c")),
])
def test_parse_valid(path, expected):
    assert parse_path(path, M) == expected

@pytest.mark.parametrize("path", [
    "/other",
    "/store_webx",
    "/store_web//a",
    "/store_web/db/a/b",
    "/store_web/db/a/",
])
def test_parse_malformed(path):
    assert isinstance(parse_path(path, M), Malformed)

def test_mount_is_normalized():
    assert normalize_mount("store_web/") == "/store_web"
    assert parse_path("/store_web/db", "store_web/") == OneSegment("db")
    with pytest.raises(ValueError):
        normalize_mount("/")
