[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamlnode"
version = "0.1.0"
description = "A mutable YAML node graph: build nodes from document events, edit them, and replay them as events"
requires-python = ">=3.10"
dependencies = []
keywords = ["yaml", "node", "document", "graph", "events", "anchors"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yamlnode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
