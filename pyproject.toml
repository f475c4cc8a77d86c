[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "headerthemeeditor"
version = "0.1.0"
description = "Create, edit, save and install message header themes built from template pages and a desktop file"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["theme", "editor", "mail", "header", "template"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
headerthemeeditor = "headerthemeeditor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["headerthemeeditor"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
