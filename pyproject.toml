[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrforge"
version = "0.1.0"
description = "Context-free grammar analysis: symbol tables, FIRST and FOLLOW sets, and canonical LR(1) item collections."
requires-python = ">=3.10"
dependencies = []
keywords = ["grammar", "parser", "lr1", "first-set", "follow-set", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lrforge = "lrforge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lrforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
