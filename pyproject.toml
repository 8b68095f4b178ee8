[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crego"
version = "0.1.0"
description = "Component registry and command line for exploring the building blocks of generated Go projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["go", "project-generator", "scaffolding", "components", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.scripts]
crego = "crego.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crego"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
