[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "authsvc"
version = "0.1.0"
description = "Building blocks for an OIDC authentication service: URL, form and cookie codecs, URI parsing, an HTTPS POST client, session strings, trigger rules and configuration checks."
requires-python = ">=3.10"
dependencies = []
keywords = ["oidc", "authentication", "session", "cookies", "http", "uri"]
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
    "Topic :: Internet :: WWW/HTTP :: Session",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["authsvc"]

[tool.hatch.build.targets.sdist]
include = ["authsvc", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
