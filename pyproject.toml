[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treekit"
version = "0.1.0"
description = "Small binary tree toolkit: traversals, counts, BSTs, AVL right rotations, expression and decision trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "bst", "avl", "traversal", "expression tree", "decision tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treekit-tree = "treekit.tree:main"
treekit-expression = "treekit.expression:main"
treekit-diagnose = "treekit.decision:main"
treekit-bst = "treekit.bst:main"
treekit-avl = "treekit.avl:main"

[tool.hatch.build.targets.wheel]
packages = ["treekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
