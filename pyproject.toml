[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "watchcmd"
version = "0.0.1"
description = "Execute a program periodically, showing its output"
requires-python = ">=3.10"
dependencies = []
keywords = ["watch", "periodic", "command", "monitoring", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
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

[project.scripts]
watch = "watchcmd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["watchcmd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
