[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "srvcommon"
version = "0.1.0"
description = "Helpers for HTTP server code: base64, HTTP dates, URL escaping and canonicalisation, multi-string lists and mutable string buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "url", "normalization", "canonicalization", "base64", "http-date", "percent-encoding", "multisz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["srvcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
