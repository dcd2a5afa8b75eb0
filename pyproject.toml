[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interviewkit"
version = "0.1.0"
description = "Classic interview algorithms, design patterns and concurrency helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "interview",
    "design-patterns",
    "concurrency",
    "pipeline",
    "pubsub",
    "worker-pool",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["interviewkit"]

[tool.pytest.ini_options]
addopts = "-ra"
