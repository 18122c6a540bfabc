[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visionbasics"
version = "0.1.0"
description = "Small, readable image-processing routines on NumPy arrays: BMP parsing, interpolation, convolution, morphology, pixel editing and blob colour sampling."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "image-processing",
    "computer-vision",
    "bmp",
    "interpolation",
    "convolution",
    "morphology",
    "erosion",
    "dilation",
    "numpy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
visionbasics = "visionbasics.cli:main"
visionbasics-bmp = "visionbasics.bmp:main"

[tool.hatch.build.targets.wheel]
packages = ["visionbasics"]

[tool.hatch.build.targets.sdist]
include = [
    "visionbasics",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
