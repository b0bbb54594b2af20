[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapeboard"
version = "0.1.0"
description = "A command-driven editor of plane figures (circles, polygons, stars and freehand dot shapes) with live area, perimeter and centre readouts."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "shapes", "figures", "area", "perimeter", "stars", "editor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapeboard = "shapeboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shapeboard"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
