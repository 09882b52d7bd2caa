[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agotime"
version = "0.5.0"
description = "Lossily format a duration as a human-readable phrase like '3 days ago', in many languages."
requires-python = ">=3.10"
dependencies = []
keywords = ["time", "duration", "ago", "humanize", "relative-time", "i18n"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: Localization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agotime = "agotime.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agotime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
