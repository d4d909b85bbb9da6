[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoshelf"
version = "0.1.0"
description = "Classic algorithms on arrays, integers, strings, matrices, linked lists and binary trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-tree",
    "linked-list",
    "searching",
    "dynamic-programming",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algoshelf"]

[tool.pytest.ini_options]
addopts = "-ra"
