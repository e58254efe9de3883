[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookstore"
version = "0.1.0"
description = "Small terminal bookstore: keep a book catalogue and sales transactions in plain comma-separated text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["bookstore", "point-of-sale", "inventory", "transactions", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookstore = "bookstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bookstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
