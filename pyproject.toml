[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stingbank"
version = "0.1.0"
description = "A small interactive console bank that keeps per-account deposits, accrues interest over time and stores them safely on disk"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "deposit", "interest", "console", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stingbank = "stingbank.interaction:main"

[tool.hatch.build.targets.wheel]
packages = ["stingbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
