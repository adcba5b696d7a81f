[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixbig"
version = "0.1.0"
description = "Fixed-width unsigned big integers with wrap-around arithmetic on 64-bit limbs"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "fixed-width", "multiprecision", "karatsuba", "arithmetic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = ["pytest", "hypothesis"]

[project.scripts]
fixbig = "fixbig.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fixbig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
