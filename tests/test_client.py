import socket

import pytest

from arenahub.client import AccountsManagerClient, AccountsManagerClientError
from arenahub.routes import MOTD
from arenahub.server import AccountsManagerServer


def _closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_client_creation():
    client = AccountsManagerClient("127.0.0.1:1234")
    assert client.base_url == "http://127.0.0.1:1234"


def test_client_creation_trims_trailing_slashes():
    client = AccountsManagerClient("127.0.0.1:1234//")
    assert client.base_url == "http://127.0.0.1:1234"


@pytest.mark.asyncio
async def test_client_connecting_to_server():
    server = await AccountsManagerServer.run()
    host, port = server.address
    try:
        async with AccountsManagerClient(f"{host}:{port}") as client:
            response = await client.get_server_status()
        assert response.motd != ""
        assert response.motd == MOTD
    finally:
        await server.shutdown_gracefully_await()


@pytest.mark.asyncio
async def test_unreachable_server_raises_client_error():
    client = AccountsManagerClient(f"127.0.0.1:{_closed_port()}")
    try:
        with pytest.raises(AccountsManagerClientError):
            await client.get_server_status()
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_close_is_repeatable_and_session_reopens():
    server = await AccountsManagerServer.run()
    host, port = server.address
    client = AccountsManagerClient(f"{host}:{port}")
    try:
        first = await client.get_server_status()
        await client.close()
        await client.close()
        second = await client.get_server_status()
        assert first == second
    finally:
        await client.close()
        await server.shutdown_gracefully_await()