[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursework"
version = "0.1.0"
description = "A small school management system with text, bit-field, linked-list, formula and prime-number utilities"
requires-python = ">=3.10"
keywords = ["school", "students", "grades", "linked-list", "bitfields", "primes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursework-school = "coursework.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursework"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
