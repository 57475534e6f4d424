[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iptscore"
version = "0.1.0"
description = "Contact tracking, heatmap helpers and multitouch event generation for capacitive touchscreens"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["touchscreen", "multitouch", "heatmap", "contact-tracking", "input-events"]
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
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["iptscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
