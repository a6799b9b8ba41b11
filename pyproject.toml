[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lspy"
version = "0.1.0"
description = "A small Lisp interpreter with cons cells, closures and a minimal reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "scheme", "cons", "closures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: Lisp",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lspy = "lspy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lspy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
