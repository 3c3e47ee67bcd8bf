[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitools"
version = "0.1.0"
description = "Small command-line tools: a calculator, a contact book, a text file analyzer and a tiny HTTP server."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "contacts", "csv", "word-count", "http-server", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calculator = "minitools.calculator:main"
contact-book = "minitools.contactbook:main"
file-analyzer = "minitools.fileanalyzer:main"
tiny-server = "minitools.tinyserver:main"

[tool.hatch.build.targets.wheel]
packages = ["minitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
