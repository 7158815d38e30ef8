[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small command-line utilities and building blocks: bitmap info, byte flipping, matrix inversion, text replacement, file comparison, a car simulator, a calculator engine, rationals, URL errors and a linked list."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bitmap",
    "matrix",
    "rational",
    "linked-list",
    "calculator",
    "text-replace",
    "command-line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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

[project.scripts]
labworks-bmpinfo = "labworks.bmpinfo:main"
labworks-copyfile = "labworks.copyfile:main"
labworks-flipbyte = "labworks.flipbyte:main"
labworks-invert = "labworks.invert:main"
labworks-replace = "labworks.replace:main"
labworks-compare = "labworks.compare:main"
labworks-car = "labworks.car_commands:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.hatch.build.targets.sdist]
include = ["labworks", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
