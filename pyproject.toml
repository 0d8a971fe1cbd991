[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termwidgets"
version = "0.1.0"
description = "Terminal UI widgets: text prompts with line editing and scrollable views over an in-memory cell buffer"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "widgets", "prompt", "scrollview", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Terminals",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
