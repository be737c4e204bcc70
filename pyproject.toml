[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aprsdecode"
version = "0.1.2"
description = "APRS packet parsing and encoding for textual (APRS-IS) and binary (AX.25) input"
requires-python = ">=3.10"
dependencies = []
keywords = ["aprs", "ax25", "amateur-radio", "packet", "ham-radio"]
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
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aprsdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
