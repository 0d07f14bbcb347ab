[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zsan"
version = "0.1.0"
description = "Compact lossless encoding for ASCII text dominated by spaces and numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "ascii", "varint", "fixed-width", "numbers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zsan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
