[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprasm"
version = "0.1.0"
description = "A small compiler from arithmetic assignment expressions to three-address code and 32-bit x86 NASM assembly"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "three-address code",
    "assembly",
    "nasm",
    "x86",
    "expression parser",
    "shunting-yard",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exprasm = "exprasm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exprasm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
