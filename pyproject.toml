[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gabornoise"
version = "0.1.0"
description = "Procedural Gabor noise in 2D and on surfaces, with its power spectrum, PPM image export and small triangle-mesh utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gabor",
    "noise",
    "procedural",
    "texture",
    "sparse convolution",
    "power spectrum",
    "mesh",
    "obj",
    "ppm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gabornoise-images = "gabornoise.images:main"

[tool.hatch.build.targets.wheel]
packages = ["gabornoise"]

[tool.hatch.build.targets.sdist]
include = ["gabornoise", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
