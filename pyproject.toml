[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rangepanel"
version = "0.1.0"
description = "State and layout logic for a shooting-range handheld panel: shot counter, stage timer, competition page, bubble level, artificial horizon, battery gauge and screen navigation."
requires-python = ">=3.10"
dependencies = []
keywords = ["shooting", "stage timer", "shot counter", "bubble level", "artificial horizon", "embedded ui"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rangepanel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
