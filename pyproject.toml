[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brunaos"
version = "0.1.0"
description = "A modular operating-system kernel model for UAV swarms: processes, threads, round-robin scheduling, message passing and a memory-management interface."
requires-python = ">=3.10"
dependencies = []
keywords = ["uav", "swarm", "kernel", "scheduler", "ipc", "process", "thread"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Operating System",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brunaos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
