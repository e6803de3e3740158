"""问候接口测试

覆盖端点：
- GET /hi
- POST /hi
"""

import logging

import pytest
from httpx import AsyncClient


class TestGreeting:

    @pytest.mark.asyncio
    async def test_get_hello(self, client: AsyncClient):
        resp = await client.get("/hi")
        assert resp.status_code == 200
        assert resp.text == "Hello"
        assert resp.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_post_hello(self, client: AsyncClient):
        resp = await client.post("/hi", json={"name": "Anji"})
        assert resp.status_code == 200
        assert resp.text == "Hi Anji"

    @pytest.mark.asyncio
    async def test_post_hello_keeps_name_verbatim(self, client: AsyncClient):
        """不裁剪、不转义"""
        resp = await client.post("/hi", json={"name": " <b>Anji</b> "})
        assert resp.text == "Hi  <b>Anji</b> "

    @pytest.mark.asyncio
    async def test_post_hello_empty_name(self, client: AsyncClient):
        resp = await client.post("/hi", json={"name": ""})
        assert resp.status_code == 200
        assert resp.text == "Hi "

    @pytest.mark.asyncio
    async def test_post_hello_numeric_name(self, client: AsyncClient):
        resp = await client.post("/hi", json={"name": 42})
        assert resp.status_code == 200
        assert resp.text == "Hi 42"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"name": None}])
    async def test_post_hello_missing_name(self, client: AsyncClient, body):
        """缺少 name → 400"""
        resp = await client.post("/hi", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Name is required", "code": "VALIDATION_ERROR"}

    @pytest.mark.asyncio
    async def test_missing_name_is_logged(self, client: AsyncClient, caplog):
        with caplog.at_level(logging.WARNING, logger="bookstore.routers.greeting"):
            await client.post("/hi", json={})
        assert any("Name is required" in r.getMessage() for r in caplog.records)
