[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nomadpack"
version = "0.1.0"
description = "Helpers for pack tooling: loggers, title casing, interrupt handling, directory walking and copying, fixture lookup and a terminal spinner."
requires-python = ">=3.10"
dependencies = []
keywords = ["packs", "filesystem", "spinner", "logging", "walk", "fixtures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nomadpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
