[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wheelkit"
version = "0.1.0"
description = "Small hand-rolled data structures, algorithms and tools: dequeue, array list, quicksort, KMP, binary trees, IEEE 754 inspection and the logic of two small games."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "dequeue",
    "binary-tree",
    "quicksort",
    "kmp",
    "ieee754",
    "snake",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hex2float = "wheelkit.tools:hex2float_main"
hex2double = "wheelkit.tools:hex2double_main"
wheel-sort = "wheelkit.tools:sort_main"
wheel-uniq = "wheelkit.tools:uniq_main"

[tool.hatch.build.targets.wheel]
packages = ["wheelkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
