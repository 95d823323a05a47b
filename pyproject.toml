[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "testbench"
version = "1.0.1"
description = "Testing and benchmarking tools for concurrent Python code"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "benchmarking", "multithreading", "concurrent", "threads", "race-condition"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["testbench"]

[tool.pytest.ini_options]
addopts = "-ra"
