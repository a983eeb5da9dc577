[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mudkit"
version = "0.1.0"
description = "Core game-world handling for a classic text MUD: command parsing and dispatch, affects, object and character bookkeeping, regeneration limits, and area-file merging."
requires-python = ">=3.10"
dependencies = []
keywords = ["mud", "text-adventure", "multi-user-dungeon", "game-server", "interpreter"]
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
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mudkit-merge = "mudkit.merge:main"

[tool.hatch.build.targets.wheel]
packages = ["mudkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
