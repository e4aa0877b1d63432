[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "userservice"
version = "0.1.0"
description = "A small user management HTTP service built on Flask and SQLite"
requires-python = ">=3.12"
dependencies = [
    "flask",
]
keywords = ["users", "http", "rest", "service", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
userservice = "userservice.app:main"

[tool.hatch.build.targets.wheel]
packages = ["userservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py312"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.12"
strict = true
