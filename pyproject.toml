[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nlregress"
version = "0.1.0"
description = "Non-linear regression by finite-difference batch gradient descent, with a live plot of the fitted curve"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["regression", "gradient descent", "curve fitting", "machine learning", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nlregress = "nlregress.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nlregress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
