[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dein"
version = "0.1.0"
description = "Compile-time dependency injection: resolve a provider graph and generate the Go source that wires it."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dependency-injection",
    "code-generation",
    "go",
    "container",
    "topological-sort",
]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dein"]

[tool.hatch.build.targets.sdist]
include = ["dein", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
