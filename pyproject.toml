[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rbsql"
version = "0.1.0"
description = "SQL condition builder, paging and logical-delete helpers, statement interceptors, ObjectId and snowflake id generators"
requires-python = ">=3.10"
keywords = ["sql", "query-builder", "pagination", "snowflake", "objectid", "logical-delete"]
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
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rbsql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
