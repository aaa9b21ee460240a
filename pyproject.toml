[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raygui"
version = "0.1.0"
description = "Camera navigation models and remappable key bindings for an interactive render viewer."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "rendering",
    "camera",
    "navigation",
    "orbit camera",
    "free camera",
    "key bindings",
    "viewport",
]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["raygui"]

[tool.hatch.build.targets.sdist]
include = [
    "raygui",
    "tests",
    "pyproject.toml",
]

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
