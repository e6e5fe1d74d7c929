[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqvect"
version = "0.2.0"
description = "Building blocks for an embeddable vector store: data types, similarity measures, an HNSW index and metadata filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "embeddings", "similarity-search", "hnsw", "nearest-neighbour", "semantic-search", "metadata-filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqvect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
