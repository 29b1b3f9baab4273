"""Tests for the hello example."""

import pytest

from rue.testing import TestClient


class TestHelloApp:
    """Verify every route in the hello example works through the ASGI pipeline."""

    @pytest.mark.asyncio
    async def test_index(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "Hello, World!"

    @pytest.mark.asyncio
    async def test_greet_with_path_param(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/greet/alice")
            assert response.status == 200
            assert response.text == "Hello, alice!"

    @pytest.mark.asyncio
    async def test_greet_from_form(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.post("/greet", form={"name": "bob"})
            assert response.text == "Hello, bob!"

    @pytest.mark.asyncio
    async def test_host_values(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/whoami", headers={"host": "api.example.com"})
            assert response.text == "api on api.example.com"

    @pytest.mark.asyncio
    async def test_custom_response_status_and_header(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/custom")
            assert response.status == 201
            assert response.text == "Created"
            assert ("x-custom", "rue") in response.headers

    @pytest.mark.asyncio
    async def test_nested_router(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/status")
            assert response.status == 200
            assert "application/json" in response.content_type

            response = await client.delete("/api/files/a/b")
            assert response.text == "DELETE /api/files/a/b"

    @pytest.mark.asyncio
    async def test_custom_not_found(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/nonexistent")
            assert response.status == 404
            assert response.text == "Nothing at /nonexistent"
