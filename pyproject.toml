[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokerleague"
version = "0.1.0"
description = "Track poker wins in a JSON file and serve the league table as a WSGI application"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "league", "wsgi", "scoreboard", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokerleague-cli = "pokerleague.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pokerleague"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
