[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfrtkit"
version = "0.1.7"
description = "Data model for programmable-switch runtime tables: match values, action data, registers, ports and pretty printing."
requires-python = ">=3.10"
dependencies = [
    "tabulate",
]
keywords = ["p4", "tofino", "bfrt", "switch", "tables", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bfrtkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
