[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "philosophers"
version = "0.1.0"
description = "Dining philosophers set-up: argument parsing, table construction and thread start-up"
requires-python = ">=3.10"
dependencies = []
keywords = ["dining-philosophers", "concurrency", "threads", "locks", "simulation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
philo = "philosophers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["philosophers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
