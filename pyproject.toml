[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rfcpointer"
version = "0.1.0"
description = "JSON Pointer (RFC 6901) lookup and assignment on plain Python JSON data"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "json-pointer", "rfc6901", "pointer"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rfcpointer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
