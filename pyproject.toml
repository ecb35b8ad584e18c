[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mifview"
version = "0.1.0"
description = "Inspect and edit MIF raster images: colour isolation filter, connected-structure detection and metadata editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "raster", "mif", "filter", "flood-fill", "metadata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mifview = "mifview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mifview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
