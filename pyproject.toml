[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "myshell"
version = "0.1.0"
description = "A small interactive shell with built-in count, search and typeline commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "wc", "grep", "head", "tail"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myshell = "myshell.shell:main"

[tool.setuptools.packages.find]
include = ["myshell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
