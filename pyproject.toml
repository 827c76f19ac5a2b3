[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "topmeter"
version = "0.1.0"
description = "Terminal-independent parts of an interactive process viewer: colour schemes, key codes, function bar, incremental search and filter, setup-page items and CPU affinity"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "process-viewer", "terminal", "colour-scheme", "cpu-affinity", "incremental-search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["topmeter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
