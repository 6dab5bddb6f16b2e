[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "themescale"
version = "0.1.0"
description = "Named theme values, scales and breakpoints for CSS-style properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["css", "theme", "design-tokens", "breakpoints", "styles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["themescale"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
