"""HTTP handlers and routing of the accounts manager."""

from __future__ import annotations

from aiohttp import web

from arenahub.status import AccountsServerStatus, AppData

MOTD = "Accounts manager is running! Nothing interesting so far..."

APP_DATA_KEY = web.AppKey("app_data", AppData)


async def overall_status(request: web.Request) -> web.Response:
    """Report the overall server status as JSON."""
    status = AccountsServerStatus(motd=MOTD)
    return web.json_response(status.to_dict())


async def create_account(request: web.Request) -> web.Response:
    """Answer an account creation request."""
    return web.Response(text="<h1>create_account!</h1>", content_type="text/html")


def build_app(app_data: AppData) -> web.Application:
    """Create the application with all routes and the shared state attached."""
    app = web.Application()
    app[APP_DATA_KEY] = app_data
    app.router.add_get("/", overall_status)
    app.router.add_post("/api/account/create", create_account)
    return app