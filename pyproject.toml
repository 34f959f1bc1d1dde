[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "naviz"
version = "0.5.1"
description = "Scene layout and drawing specifications for visualizing neutral-atom quantum machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["naviz", "visualization", "neutral atoms", "quantum computing", "layout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["naviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
