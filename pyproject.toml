[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fileenc"
version = "0.1.0"
description = "Encrypt and decrypt every file in a directory through a chain of simple byte transforms"
requires-python = ">=3.10"
dependencies = []
keywords = ["encryption", "obfuscation", "xor", "files", "batch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fileenc = "fileenc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fileenc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
