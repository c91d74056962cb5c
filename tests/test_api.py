import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.search_service import SearchService
from app.models.search_query import parse_int_param
from models.user import User

USERS = [
    User(id=1, name="Boyd Wolf", age=22, gender="male", about="Nulla cillum enim voluptate"),
    User(id=2, name="Hilda Mayer", age=21, gender="female", about="Sit commodo consectetur"),
    User(id=3, name="Brooks Aguilar", age=22, gender="male", about="Velit ullamco cillum aliqua"),
]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("SEARCH_ACCESS_TOKEN", raising=False)
    app.state.search_service = SearchService(USERS)
    yield TestClient(app)
    app.state.search_service = None


def ids(resp):
    return [u["id"] for u in resp.json()["data"]]


def test_hello_world(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Hello World"


def test_search_defaults_return_everyone(client):
    resp = client.get("/search/")
    body = resp.json()

    assert resp.status_code == 200
    assert body["status"] == "ok"
    assert ids(resp) == [1, 2, 3]
    assert body["meta"]["total_hits"] == 3
    assert body["meta"]["limit"] == 0


def test_search_with_sort_and_pagination(client):
    resp = client.get("/search/", params={
        "query": "cillum",
        "order_field": "Id",
        "order_by": "-1",
        "limit": "1",
        "offset": "0",
    })
    assert resp.status_code == 200
    assert ids(resp) == [3]
    assert resp.json()["data"][0]["name"] == "Brooks Aguilar"


def test_empty_numeric_params_default_to_zero(client):
    resp = client.get("/search/", params={"order_by": "", "limit": "", "offset": ""})
    assert resp.status_code == 200
    assert ids(resp) == [1, 2, 3]


@pytest.mark.parametrize("value", ["ten", "1_0", " 1", "1 ", "1.5", "\u00b2", "\u0663"])
def test_non_integer_param_is_bad_parameter(client, value):
    resp = client.get("/search/", params={"limit": value})
    body = resp.json()

    assert resp.status_code == 400
    assert body["status"] == "error"
    assert body["error"]["code"] == "BAD_PARAMETER"
    assert body["error"]["details"] == {"limit": value}


@pytest.mark.parametrize("value, expected", [
    (None, 0),
    ("", 0),
    ("7", 7),
    ("-1", -1),
    ("+3", 3),
    ("007", 7),
])
def test_parse_int_param_accepts_plain_integers(value, expected):
    assert parse_int_param("limit", value) == expected


@pytest.mark.parametrize("params, code", [
    ({"offset": "-1"}, "INVALID_PARAMETER"),
    ({"limit": "-1"}, "INVALID_PARAMETER"),
    ({"offset": "4"}, "OFFSET_OUT_OF_RANGE"),
    ({"order_field": "About", "order_by": "1"}, "INVALID_SORT_FIELD"),
    ({"order_by": "3"}, "INVALID_SORT_DIRECTION"),
])
def test_engine_errors_map_to_400(client, params, code):
    resp = client.get("/search/", params=params)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == code


def test_request_id_is_echoed(client):
    resp = client.get("/search/", headers={"X-Request-Id": "abc123"})
    assert resp.headers["X-Request-Id"] == "abc123"
    assert resp.json()["meta"]["request_id"] == "abc123"


def test_request_id_generated_when_missing(client):
    resp = client.get("/search/")
    assert resp.headers["X-Request-Id"]


def test_access_token_required_when_configured(client, monkeypatch):
    monkeypatch.setenv("SEARCH_ACCESS_TOKEN", "secret")

    resp = client.get("/search/", headers={"AccessToken": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "BAD_ACCESS_TOKEN"

    resp = client.get("/search/", headers={"AccessToken": "secret"})
    assert resp.status_code == 200


def test_health(client):
    resp = client.get("/search/health")
    assert resp.status_code == 200
    assert resp.json()["data"] == {"total_users": 3, "status": "ok"}


def test_lifespan_loads_packaged_dataset(monkeypatch):
    monkeypatch.delenv("SEARCH_DATASET_PATH", raising=False)
    monkeypatch.delenv("SEARCH_ACCESS_TOKEN", raising=False)
    app.state.search_service = None

    with TestClient(app) as client:
        resp = client.get("/search/", params={"query": "cillum", "order_field": "Id", "order_by": "1"})
        assert resp.status_code == 200
        assert ids(resp) == [0, 2, 3, 8]

    app.state.search_service = None
