[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdrscan"
version = "0.1.0"
description = "Scan C header files for includes, function declarations, structs and #define directives"
requires-python = ">=3.10"
dependencies = []
keywords = ["c", "header", "parser", "bindings", "declarations", "structs", "macros"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hdrscan = "hdrscan.parse:main"

[tool.hatch.build.targets.wheel]
packages = ["hdrscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
