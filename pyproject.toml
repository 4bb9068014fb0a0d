[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knockquotes"
version = "0.1.0"
description = "A small web server that shows a random knock-knock quote from a SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["knock-knock", "quotes", "jokes", "web", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Games/Entertainment :: Fortune Cookies",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knockquotes = "knockquotes.server:main"

[tool.hatch.build.targets.wheel]
packages = ["knockquotes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
