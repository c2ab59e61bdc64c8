[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcclist"
version = "0.1.0"
description = "A heterogeneous list with type-checked access, in-place assignment and index-checked editing."
requires-python = ">=3.10"
dependencies = []
keywords = ["list", "heterogeneous", "container", "any", "typed access"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pcclist-demo = "pcclist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["pcclist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
