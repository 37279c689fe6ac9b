"""Accounts manager server and client, game launcher model and game server stub."""

__version__ = "0.1.0"