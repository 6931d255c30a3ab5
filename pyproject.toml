[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designpatterns"
version = "0.1.0"
description = "Small, tested implementations of classic creational, structural, behavioral and concurrency design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "gof",
    "observer",
    "visitor",
    "builder",
    "pipeline",
    "concurrency",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["designpatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
