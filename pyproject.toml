[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmrinet"
version = "0.1.3"
description = "Encoding and decoding of frames for CMRInet model-railway networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["CMRInet", "CMRI", "model-railway", "frame", "protocol"]
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
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmrinet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
