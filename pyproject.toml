[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankterm"
version = "0.1.0"
description = "A small terminal banking system that keeps accounts in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["banking", "accounts", "terminal", "menu", "text-database"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankterm = "bankterm.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["bankterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
