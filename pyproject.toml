[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmtimer"
version = "0.1.0"
description = "Local-mean binarization of 8-bit grayscale BMP images, plus simple code timers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "binarization", "grayscale", "timer", "stopwatch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
gray2mono = "gmtimer.binarize:main"
gmtimer-demo = "gmtimer.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["gmtimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
