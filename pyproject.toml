[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillkit"
version = "0.1.0"
description = "Small classic programming drills: digit reversal, binary search counting, linked structures, pet records and Bulls and Cows"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "data-structures",
    "binary-search",
    "linked-list",
    "stack",
    "bulls-and-cows",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillkit-reverse = "drillkit.reverse:main"
drillkit-count = "drillkit.counting:main"
drillkit-pets = "drillkit.pets:main"
drillkit-list = "drillkit.linked:main"
drillkit-stack = "drillkit.stack:main"
drillkit-tree = "drillkit.tree:main"
drillkit-bulls = "drillkit.game:main"

[tool.hatch.build.targets.wheel]
packages = ["drillkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
