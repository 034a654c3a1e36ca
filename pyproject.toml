[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sievetools"
version = "0.1.0"
description = "A bit array, a sieve of Eratosthenes and a C comment stripper"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "sieve", "eratosthenes", "bitset", "comments"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sievetools-primes = "sievetools.primes:main"
sievetools-no-comment = "sievetools.no_comment:main"

[tool.hatch.build.targets.wheel]
packages = ["sievetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
