[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireframe"
version = "0.1.0"
description = "Isometric wireframe projection, line rasterising, XPM parsing and in-memory pixel images"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "isometric", "xpm", "raster", "graphics", "height map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wireframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
