[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedlists"
version = "0.1.0"
description = "Singly and doubly linked lists, plus a min-priority task queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "priority queue", "data structures"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
linkedlists-doubly-demo = "linkedlists.doubly:main"
linkedlists-taskqueue-demo = "linkedlists.taskqueue:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
