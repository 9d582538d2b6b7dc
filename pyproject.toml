[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "minishell"
version = "0.1.0"
description = "Tokenizer, parser, variable expansion and export/unset built-ins for a small POSIX-style shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "parser", "variable-expansion", "environment"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["minishell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
