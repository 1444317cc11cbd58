[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sponsorblock"
version = "0.6.1"
description = "A client for the SponsorBlock API."
requires-python = ">=3.10"
keywords = ["sponsorblock", "youtube", "segments", "ads", "sponsors", "metadata"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sponsorblock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
