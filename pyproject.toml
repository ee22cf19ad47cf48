[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arborlib"
version = "0.1.0"
description = "Small utility toolkit: printf-style string formatting, saturating math, console logging, BMP files, a block heap model, input state and simple containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "formatting", "logging", "bitmap", "bmp", "allocator", "containers"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arborlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
