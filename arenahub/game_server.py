"""Game server entry point."""

from __future__ import annotations

import argparse


def add(left: int, right: int) -> int:
    """Return the sum of two numbers."""
    return left + right


def main(argv: list[str] | None = None) -> int:
    """Start the game server."""
    parser = argparse.ArgumentParser(prog="game-server", description="Run the game server.")
    parser.parse_args(argv)
    print("Game server!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())