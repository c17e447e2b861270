[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enhanced_input"
version = "0.24.2"
description = "Action-based input mapping: action values, modifier keys, bindings, trigger states, action events and mocking"
requires-python = ">=3.10"
dependencies = []
keywords = ["input", "actions", "bindings", "keybinding", "games"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enhanced_input"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
