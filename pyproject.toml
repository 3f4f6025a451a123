[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixserver"
version = "0.1.0"
description = "A minimal FIX protocol server: message model, encoder, parser and a single-client TCP echo session."
requires-python = ">=3.10"
keywords = ["fix", "financial-information-exchange", "trading", "tcp", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixserver = "fixserver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fixserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
