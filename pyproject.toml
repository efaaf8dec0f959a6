[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ygtools"
version = "0.1.0"
description = "Compiler-building support utilities, a snapshot test runner and small front ends for toy languages"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "cli", "ansi", "testing"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ytest = "ygtools.ytest.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["ygtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
