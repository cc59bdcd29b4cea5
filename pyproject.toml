[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asmlang"
version = "0.1.0"
description = "Front end for a small x86 systems language: tokens, parser, syntax tree and assembly helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "x86", "assembly", "syntax tree"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asmlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
