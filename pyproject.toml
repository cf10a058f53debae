[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nonisoconv"
version = "0.1.0"
description = "Integer-to-string in any radix from 2 to 36 with 32-bit wrapping, and fixed-width float formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["itoa", "ltoa", "utoa", "ultoa", "dtostrf", "radix", "number formatting", "embedded"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["nonisoconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
