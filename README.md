# arenahub

Building blocks for a small online game:

- an accounts manager HTTP server built on aiohttp, with an async client for it (`arenahub.server`, `arenahub.client`);
- the state model of the game launcher, which switches between Login, Register and Error views and centres its window on the screen (`arenahub.launcher`, `arenahub.gui`);
- a stub for the game server (`arenahub.game_server`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Accounts server

Start the server:

```
arenahub-accounts-server
```

The server listens on a port chosen by the system on `127.0.0.1` and logs the address it is listening on. Logging goes to standard error at debug level, including a line for each request and response. The server runs until you press Ctrl+C and then shuts down cleanly.

Routes:

| Method | Path                   | Response                                    |
|--------|------------------------|---------------------------------------------|
| GET    | `/`                    | JSON status: `{"motd": "..."}`              |
| POST   | `/api/account/create`  | a fixed HTML page, `<h1>create_account!</h1>` |

### Running the server from code

```python
import asyncio

from arenahub.client import AccountsManagerClient
from arenahub.server import AccountsManagerServer


async def demo():
    server = await AccountsManagerServer.run()
    host, port = server.address
    async with AccountsManagerClient(f"{host}:{port}") as client:
        status = await client.get_server_status()
        print(status.motd)
    await server.shutdown_gracefully_await()


asyncio.run(demo())
```

- `AccountsManagerServer.run()` starts the server. `address` is its `(host, port)` pair and `url` is its base URL.
- `shutdown_gracefully()` signals the server to stop and `await_shutdown()` waits until it has stopped. `shutdown_gracefully_await()` does both. If the stop signal has already been sent, `shutdown_gracefully()` raises `OSError`.
- The server can also be used as `async with await AccountsManagerServer.run() as server:`, which stops it on exit.
- `AccountsManagerClient(address, timeout=5.0)` takes a `host:port` address. If a request fails, times out or returns a malformed status, `get_server_status()` raises `AccountsManagerClientError`. Call `close()` or use the client as an async context manager to release its HTTP session.
- `arenahub.status.AccountsServerStatus` converts to and from a JSON object with `to_dict()` and `from_dict()`. `from_dict()` raises `ValueError` if the object is malformed.
- `arenahub.routes.build_app(app_data)` returns the bare `aiohttp.web.Application` with both routes, so you can serve it in your own way.

## Game launcher model

`arenahub.launcher.GuiLauncher` holds the launcher's current view (`LauncherView.LOGIN`, `REGISTER` or `ERROR`) and the text entered in it (`LoginViewData` or `RegisterViewData`, in `data`). It draws nothing itself. A front end does the following each frame:

- calls `press(button)` for each button that was clicked. `buttons` lists the buttons that are valid in the current view, and any other name raises `ValueError`;
- then calls `finish_frame()`. This applies a pending view change, resets the entered data and returns the new view, or `None` if the view did not change.

The Login button and the Register button only print what was entered. The Register button also waits `register_delay` seconds (1 second by default).

`window_size()` and `window_position(screen_width, screen_height)` give the launcher window's geometry. Both are scaled by `arenahub.gui.GuiSettings.scale`.

`arenahub.gui.constrain_screen_size(screen_width, screen_height)` returns the window size to enforce when the screen is smaller than the 800×600 minimum, and `None` otherwise.

## Game server

```
arenahub-game-server
```

This prints a greeting and exits.

## What is not included

- Accounts are not created or stored. The create route returns a fixed page, and the shared `AppData` holds no state.
- The launcher does not contact the accounts server to log in or register, and it does not render a window.
- The game server does not serve anything.
- The accounts server command has no options. Its port is always chosen by the system.