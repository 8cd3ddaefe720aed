[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicsim"
version = "0.1.0"
description = "A small digital logic simulator with AND, OR, NOT and XOR gates and an interactive circuit editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "gates", "circuit", "simulator", "digital", "boolean"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicsim = "logicsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["logicsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
