[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlparse"
version = "0.1.0"
description = "Parser for GraphQL queries and schema definition language documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "parser", "schema", "sdl", "lexer"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gqlparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
