[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morsel"
version = "0.1.0"
description = "Parser combinators that apply a child parser repeatedly: many, counts, separated lists, folds and length-prefixed data."
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "combinator", "parsing", "streaming", "binary"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["morsel"]

[tool.pytest.ini_options]
addopts = "-ra"
