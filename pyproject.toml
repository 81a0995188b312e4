[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankwars"
version = "0.1.0"
description = "Building blocks for a two-player artillery game: procedural terrain, projectiles, smoke, a sun and mesh data."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "artillery", "terrain", "procedural-generation", "mesh", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tankwars"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
