[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rebarconf"
version = "0.1.0"
description = "Parse, query and pretty-print Erlang rebar.config files"
requires-python = ">=3.10"
dependencies = []
keywords = ["erlang", "rebar", "rebar3", "config", "parser", "formatter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rebarconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
