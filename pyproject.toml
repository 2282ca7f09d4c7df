[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edados"
version = "0.1.0"
description = "Classic data structures and algorithm exercises: lists, stacks, search trees, hash tables, sorting and small problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "avl tree",
    "red-black tree",
    "binary search tree",
    "hash table",
    "open addressing",
    "shunting yard",
    "quicksort",
    "anagrams",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edados-rpn = "edados.shunting_yard:main"
edados-anagrams = "edados.anagrams:main"

[tool.hatch.build.targets.wheel]
packages = ["edados"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
