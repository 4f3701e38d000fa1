[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ternvig"
version = "0.1.0"
description = "Ternary trees with prefix traversal, and an autokey Vigenere cipher with a file reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["ternary tree", "tree traversal", "vigenere", "cipher", "autokey"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ternvig-tree-demo = "ternvig.tree_demo:main"
ternvig-cipher-demo = "ternvig.cipher_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ternvig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
