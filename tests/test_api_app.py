"""
HTTP tests for the FastAPI application
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.app import create_app
from bookshelf.catalog import BookRecord, BookStore
from bookshelf.config import Settings
from bookshelf.validation import ValidationError


@pytest.fixture
def client(seeded_store):
    app = create_app(store=seeded_store, app_settings=Settings(graphiql=False))
    with TestClient(app) as test_client:
        yield test_client


def test_health_reports_book_count(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["books"] == 8


def test_graphql_books_over_post(client):
    resp = client.post("/graphql", json={"query": "{ books { id title createdAt } }"})

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert len(data["books"]) == 8
    assert data["books"][0]["createdAt"] == "1970-01-06T07:18:15.425Z"


def test_graphql_book_with_variables(client):
    payload = {
        "query": "query GetBook($id: ID) { book(id: $id) { title author } }",
        "variables": {"id": "2"},
        "operationName": "GetBook",
    }

    resp = client.post("/graphql", json=payload)

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["book"] == {"title": "City of Glass", "author": "Paul Auster"}


def test_graphql_unknown_book_is_null(client):
    resp = client.post("/graphql", json={"query": '{ book(id: "999") { title } }'})

    assert resp.status_code == 200
    body = resp.json()
    assert body["data"]["book"] is None
    assert "errors" not in body


def test_graphql_over_get(client):
    resp = client.get("/graphql", params={"query": "{ books { id } }"})

    assert resp.status_code == 200, resp.text
    assert len(resp.json()["data"]["books"]) == 8


def test_responses_carry_request_id(client):
    resp = client.get("/health")

    assert resp.headers.get("X-Request-ID")


def test_app_serves_injected_store():
    store = BookStore([BookRecord(id=5, title="Solo", author="Someone", created_at=0)])
    app = create_app(store=store, app_settings=Settings())

    with TestClient(app) as test_client:
        resp = test_client.post("/graphql", json={"query": "{ books { id title } }"})

    assert resp.json()["data"]["books"] == [{"id": "5", "title": "Solo"}]


def test_app_builds_store_from_catalog_path(catalog_file):
    app = create_app(app_settings=Settings(catalog_path=str(catalog_file)))

    with TestClient(app) as test_client:
        resp = test_client.get("/health")

    assert resp.json()["books"] == 2


def test_invalid_catalog_fails_startup_in_production():
    store = BookStore([BookRecord(id=1, title="Far future", author="A", created_at=10**17)])
    app = create_app(store=store, app_settings=Settings(environment="production"))

    with pytest.raises(ValidationError):
        with TestClient(app):
            pass


def test_invalid_catalog_starts_in_development():
    store = BookStore([BookRecord(id=1, title="Far future", author="A", created_at=10**17)])
    app = create_app(store=store, app_settings=Settings(environment="development"))

    with TestClient(app) as test_client:
        resp = test_client.post("/graphql", json={"query": "{ books { title createdAt } }"})

    body = resp.json()
    assert body["data"]["books"] == [{"title": "Far future", "createdAt": None}]
    assert body["errors"][0]["path"] == ["books", 0, "createdAt"]
