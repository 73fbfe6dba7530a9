[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zinx"
version = "0.1.0"
description = "Building blocks for message-oriented servers: length-field frame decoding, interceptor chains, a flag-driven logger and an area-of-interest grid for game worlds."
requires-python = ">=3.10"
keywords = ["networking", "framing", "length-field", "interceptor", "logging", "aoi", "mmo"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: System :: Networking",
    "Topic :: System :: Logging",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zinx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
