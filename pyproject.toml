[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgekit"
version = "0.1.0"
description = "Solutions to classic beginner online-judge problems as a small Python library and command"
requires-python = ">=3.10"
dependencies = []
keywords = ["online-judge", "exercises", "programming-practice", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgekit = "judgekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["judgekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
