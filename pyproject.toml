[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridslamlog"
version = "0.1.0"
description = "Sensor models, CARMEN log parsing and small numerical utilities for grid-based laser SLAM"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "slam",
    "robotics",
    "laser",
    "carmen",
    "odometry",
    "particle-filter",
    "gnuplot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rdk2carmen = "gridslamlog.tools:rdk2carmen_main"
scanstudio2carmen = "gridslamlog.tools:scanstudio2carmen_main"
log-plot = "gridslamlog.tools:log_plot_main"
log-test = "gridslamlog.tools:log_test_main"

[tool.hatch.build.targets.wheel]
packages = ["gridslamlog"]

[tool.hatch.build.targets.sdist]
include = ["gridslamlog", "tests", "README.md"]

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
