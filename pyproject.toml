[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scosapps"
version = "1.3.0"
description = "Text-mode desktop applications on an in-memory 80x25 character screen: a tiny HTML/CSS/script engine, calculator, calendar, notepad, terminal, shell and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["text-mode", "desktop", "vga", "html", "css", "calculator", "calendar", "notepad", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scosapps"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
