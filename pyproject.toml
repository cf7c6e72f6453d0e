[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hierlog"
version = "1.6.0"
description = "Hierarchical loggers with levels, additive appender calls, layouts, filters and diagnostic contexts"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "hierarchy", "mdc", "ndc", "layout", "filter"]
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
    "Topic :: System :: Logging",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hierlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
