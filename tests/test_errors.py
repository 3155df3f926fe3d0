import sqlite3

import pytest


def _boom(*args, **kwargs):
    raise sqlite3.OperationalError("disk I/O error")


@pytest.mark.parametrize(
    "path", ["/transactions", "/all-transactions", "/bar-chart", "/pie-chart"]
)
def test_store_failure_is_a_generic_500(client, store, monkeypatch, path):
    monkeypatch.setattr(store, "fetch_all", _boom)

    r = client.get(path)
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}


@pytest.mark.parametrize("path", ["/statistics", "/combined-response"])
def test_statistics_failure_is_a_generic_500(client, store, monkeypatch, path):
    monkeypatch.setattr(store, "fetch_one", _boom)

    r = client.get(path)
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}


def test_error_detail_is_logged_not_returned(client, store, monkeypatch, caplog):
    monkeypatch.setattr(store, "fetch_all", _boom)

    r = client.get("/transactions")
    assert "disk I/O" not in r.text
    assert "Error fetching transactions" in caplog.text


def test_unknown_route_uses_error_body(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_error_body_is_documented(client):
    paths = client.get("/openapi.json").json()["paths"]
    for path, code in [("/statistics", "404"), ("/transactions", "400"), ("/all-transactions", "500")]:
        schema = paths[path]["get"]["responses"][code]["content"]["application/json"]["schema"]
        assert schema["$ref"].endswith("/ErrorResponse")
