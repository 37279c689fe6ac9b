"""Command that runs the accounts manager until interrupted."""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal

from arenahub.server import AccountsManagerServer


async def _serve_until_interrupted() -> None:
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()

    try:
        loop.add_signal_handler(signal.SIGINT, stop.set)
        restore = lambda: loop.remove_signal_handler(signal.SIGINT)  # noqa: E731
    except (NotImplementedError, RuntimeError):
        previous = signal.signal(
            signal.SIGINT, lambda signum, frame: loop.call_soon_threadsafe(stop.set)
        )
        restore = lambda: signal.signal(signal.SIGINT, previous)  # noqa: E731

    try:
        server = await AccountsManagerServer.run()
        try:
            await stop.wait()
        finally:
            await server.shutdown_gracefully_await()
    finally:
        restore()


def main(argv: list[str] | None = None) -> int:
    """Run the accounts server until Ctrl+C, then shut it down gracefully."""
    parser = argparse.ArgumentParser(
        prog="accounts-server",
        description="Run the accounts manager HTTP server until interrupted.",
    )
    parser.parse_args(argv)

    print("Accounts server!", flush=True)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(_serve_until_interrupted())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())