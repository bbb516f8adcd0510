[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kalman"
version = "0.1.0"
description = "A linear Kalman filter with per-step dynamics, noise and measurement models"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "matplotlib",
]
keywords = ["kalman", "filter", "state estimation", "control", "tracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kalman-example = "kalman.example:main"

[tool.hatch.build.targets.wheel]
packages = ["kalman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
