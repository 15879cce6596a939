[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "littlehttp"
version = "0.1.0"
description = "A tiny single-threaded HTTP/1.1 server with static pages and a JSON order-status service, plus a TCP echo server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "tcp", "echo", "static-files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
littlehttp-server = "littlehttp.server:main"
littlehttp-echo-server = "littlehttp.echo:server_main"
littlehttp-echo-client = "littlehttp.echo:client_main"

[tool.hatch.build.targets.wheel]
packages = ["littlehttp"]

[tool.pytest.ini_options]
addopts = "-ra"
