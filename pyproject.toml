[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowblocks"
version = "0.1.0"
description = "Composable dataflow blocks for lines, hex, JSON, CSV, text and standard streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["dataflow", "flow-based programming", "blocks", "pipeline", "streams", "csv", "json", "hex"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["flowblocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
