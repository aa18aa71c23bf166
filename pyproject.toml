[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filehttpd"
version = "0.1.0"
description = "A small threaded HTTP server that serves HTML pages, images and files from the working directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "static", "files", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filehttpd = "filehttpd.server:main"

[tool.hatch.build.targets.wheel]
packages = ["filehttpd"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
