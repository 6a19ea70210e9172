[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orgchart"
version = "0.1.0"
description = "Organisation chart person models, JSON validation, SQL statement helpers and HS256 tokens"
requires-python = ">=3.10"
dependencies = [
    "pyjwt",
]
keywords = ["org-chart", "jwt", "sql", "validation", "json"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["orgchart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
