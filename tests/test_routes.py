import pytest
from aiohttp.test_utils import TestClient, TestServer

from arenahub.routes import APP_DATA_KEY, MOTD, build_app
from arenahub.status import AccountsServerStatus, AppData


def _client(app_data=None):
    return TestClient(TestServer(build_app(app_data or AppData())))


def test_build_app_attaches_app_data():
    app_data = AppData()
    app = build_app(app_data)
    assert app[APP_DATA_KEY] is app_data


@pytest.mark.asyncio
async def test_overall_status_returns_motd():
    async with _client() as client:
        resp = await client.get("/")
        assert resp.status == 200
        body = await resp.json()
    assert AccountsServerStatus.from_dict(body).motd == MOTD


@pytest.mark.asyncio
async def test_create_account_returns_html():
    async with _client() as client:
        resp = await client.post("/api/account/create")
        text = await resp.text()
        content_type = resp.content_type
    assert text == "<h1>create_account!</h1>"
    assert content_type == "text/html"


@pytest.mark.asyncio
async def test_create_account_rejects_get():
    async with _client() as client:
        resp = await client.get("/api/account/create")
        assert resp.status == 405


@pytest.mark.asyncio
async def test_unknown_path_is_not_found():
    async with _client() as client:
        resp = await client.get("/api/account/delete")
        assert resp.status == 404