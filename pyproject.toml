[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "confnode"
version = "0.1.0"
description = "A typed configuration tree with JSON and YAML loading and saving"
requires-python = ">=3.10"
keywords = ["configuration", "config", "json", "yaml", "tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["confnode"]

[tool.pytest.ini_options]
addopts = "-ra"
