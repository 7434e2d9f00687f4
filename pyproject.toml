[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audionodes"
version = "0.1.0"
description = "Pure-Python audio processing nodes: Freeverb-style reverb, biquad filters, channel separation/combination and leading-silence trimming"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "reverb", "freeverb", "biquad", "envelope", "channels", "trim"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["audionodes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
