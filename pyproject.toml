[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cclgen"
version = "1.0.0"
description = "Parse CCL model definitions and generate serializable GDScript classes from them"
requires-python = ">=3.10"
dependencies = []
keywords = ["code-generation", "serialization", "schema", "gdscript", "lexer", "binary"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["cclgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
