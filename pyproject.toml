[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engine2d"
version = "0.1.0"
description = "Core pieces of a small 2D game engine: vectors, easing, transforms, components, cameras, collision, rigid bodies, input state and trails."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "physics", "collision", "easing", "components"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["engine2d"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
