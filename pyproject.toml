[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankdesk"
version = "0.1.0"
description = "A small teller-desk bank: accounts, withdrawals, deposits, a service queue, undo and sorted reports, kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "teller", "queue", "undo", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankdesk = "bankdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bankdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
