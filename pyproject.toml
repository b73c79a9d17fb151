[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackswap"
version = "0.1.0"
description = "Sort distinct integers with two stacks and a limited instruction set, and check instruction sequences."
requires-python = ">=3.10"
dependencies = []
keywords = ["stacks", "sorting", "puzzle", "checker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "stackswap.solver:main"
push-swap-checker = "stackswap.checker:main"
gimme-numbers = "stackswap.gimme:main"

[tool.hatch.build.targets.wheel]
packages = ["stackswap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
