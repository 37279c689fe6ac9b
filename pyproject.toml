[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenahub"
version = "0.1.0"
description = "Accounts manager HTTP server and client, game launcher model and game server stub"
requires-python = ">=3.10"
dependencies = [
    "aiohttp",
]
keywords = ["accounts", "http", "server", "aiohttp", "game", "launcher"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
arenahub-accounts-server = "arenahub.accounts_cli:main"
arenahub-game-server = "arenahub.game_server:main"

[tool.hatch.build.targets.wheel]
packages = ["arenahub"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
