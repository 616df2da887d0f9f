[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dalfox"
version = "2.10.0"
description = "Building blocks for an XSS scanner: options model, logging, PoC formatting, reflection checks and parameter analysis helpers"
requires-python = ">=3.10"
keywords = ["xss", "security", "scanner", "web", "reflection", "csp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "beautifulsoup4",
    "tabulate",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dalfox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
