"""End-to-end tests for data responses served by FastAPI."""

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from dto_partials import data_response
from dto_partials.modules.partials.presentation.api.responses import resolve_payload
from dto_partials.modules.partials.presentation.dependencies import get_request_partials
from tests.fakes import (
    ChildData,
    ParentData,
    UnrestrictedMultiLazyData,
    WildcardMultiLazyData,
    nesting_data,
)


@pytest.fixture
def client():
    app = FastAPI()

    @app.get("/songs/unrestricted")
    async def unrestricted(request: Request):
        return UnrestrictedMultiLazyData.lazy().include("name").to_response(request)

    @app.get("/songs/wildcard")
    async def wildcard(partials=Depends(get_request_partials)):
        return data_response(WildcardMultiLazyData.lazy(), partials)

    @app.get("/parents")
    async def parents(request: Request):
        data = ParentData(id=1, amount=10, any_string="x", child=ChildData(id=2, amount=20))
        return data.to_response(request)

    @app.get("/parents/collection")
    async def parent_collection(request: Request):
        collection = ParentData.collect([
            {"id": 1, "amount": 10, "any_string": "x", "child": {"id": 2, "amount": 20}},
        ])
        return collection.to_response(request, status_code=201)

    return TestClient(app)


class TestIncludes:

    def test_request_and_manual_includes_are_combined(self, client):
        response = client.get("/songs/unrestricted", params={"include": "artist"})

        assert response.status_code == 200
        assert response.json() == {"artist": "Rick Astley", "name": "Never gonna give you up"}

    def test_manual_include_without_request(self, client):
        response = client.get("/songs/unrestricted")
        assert response.json() == {"name": "Never gonna give you up"}

    @pytest.mark.parametrize(
        "query_string",
        ["include=artist,name", "include[]=artist&include[]=name", "include=artist&include=name"],
    )
    def test_include_encodings(self, client, query_string):
        response = client.get(f"/songs/wildcard?{query_string}")
        assert response.json() == {"artist": "Rick Astley", "name": "Never gonna give you up"}

    def test_wildcard_request(self, client):
        response = client.get("/songs/wildcard?include=*")
        assert response.json() == {
            "artist": "Rick Astley",
            "name": "Never gonna give you up",
            "year": 1987,
        }


class TestExceptAndOnly:

    def test_except_with_array_parameters(self, client):
        response = client.get("/parents?except[]=amount&except[]=any_string&except[]=child.amount")
        assert response.json() == {"id": 1, "child": {"id": 2}}

    def test_only(self, client):
        response = client.get("/parents", params={"only": "id,child.id"})
        assert response.json() == {"id": 1, "child": {"id": 2}}

    def test_collection_response(self, client):
        response = client.get("/parents/collection?except=child")

        assert response.status_code == 201
        assert response.json() == [{"id": 1, "amount": 10, "any_string": "x"}]


def test_resolve_payload_from_mapping(settings):
    payload = resolve_payload(nesting_data(), {"include": "nested.name"}, settings=settings)
    assert payload["nested"] == {}
