[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liftscan"
version = "0.1.0"
description = "Barcode scanning station that collects products and writes JSON transport packages"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["barcode", "scanner", "warehouse", "serial", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
liftscan = "liftscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["liftscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
