[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuitioncentre"
version = "1.0.0"
description = "Records for running a tuition centre: students, subjects, enrolments, fees and feedback, kept in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["tuition", "education", "enrolment", "students", "sqlite", "collations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuitioncentre"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
