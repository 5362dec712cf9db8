[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishell"
version = "0.1.0"
description = "Building blocks of a small shell: tokens, quote and variable expansion, redirections and the classic builtins."
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "expansion", "redirection", "tokens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["minishell"]

[tool.hatch.build.targets.sdist]
include = ["minishell", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
