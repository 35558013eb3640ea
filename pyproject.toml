[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "camwatch"
version = "0.1.0"
description = "Camera management, detection-event storage and display bookkeeping for multi-camera object tracking."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "imageio",
]
keywords = [
    "camera",
    "object detection",
    "tracking",
    "events",
    "region counting",
]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["camwatch"]

[tool.hatch.build.targets.sdist]
include = [
    "camwatch",
    "tests",
    "pyproject.toml",
]

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
