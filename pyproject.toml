[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkcontact"
version = "0.0.1"
description = "A small interactive address book with CSV import and export"
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "csv", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Groupware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkcontact = "linkcontact.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linkcontact"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
