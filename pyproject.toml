[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "junjie-search"
version = "5.0.0"
description = "Bilingual (Chinese and English) sentence search over a text file using chained hash indexes"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "index", "hash table", "chinese", "english", "sentence"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
junjie-search = "junjie_search.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["junjie_search"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
