[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "receitario"
version = "0.1.0"
description = "Recipe book and ingredient pantry data structures with text renderings"
requires-python = ">=3.10"
dependencies = []
keywords = ["recipes", "cookbook", "pantry", "ingredients"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Portuguese (Brazilian)",
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

[tool.setuptools.packages.find]
include = ["receitario*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
