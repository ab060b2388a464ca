[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pc65"
version = "0.1.0"
description = "Symbol table, type descriptors and code-generation helpers for a Pascal compiler targeting the M65C02A core"
requires-python = ">=3.10"
dependencies = []
keywords = ["pascal", "compiler", "symbol-table", "6502", "m65c02a"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pc65"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
