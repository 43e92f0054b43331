[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hideseek"
version = "0.1.0"
description = "Client side of a multiplayer hide-and-seek game: a line-delimited JSON request client, GUI components and render batching."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "multiplayer", "hide-and-seek", "client", "gui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hideseek"]

[tool.pytest.ini_options]
addopts = "-ra"
