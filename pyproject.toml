[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsekit"
version = "0.1.0"
description = "Sparse matrices with two storage strategies, plus a small two-sum solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "matrix", "linear-algebra", "two-sum"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparsekit-array = "sparsekit.array_matrix:main"
sparsekit-linked = "sparsekit.linked_matrix:main"
sparsekit-two-sum = "sparsekit.two_sum:main"

[tool.hatch.build.targets.wheel]
packages = ["sparsekit"]

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
