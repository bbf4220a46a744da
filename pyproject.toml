[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peachc"
version = "0.1.0"
description = "Groundwork for a small C compiler: character reading with line and column tracking, token types, and a lexing pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "c", "lexer", "tokens"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
peachc = "peachc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["peachc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
