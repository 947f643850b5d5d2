[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractview"
version = "0.1.0"
description = "Interactive Mandelbrot, Julia and leaf fractal explorer with a small text and number toolkit"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "visualization", "pygame", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractview = "fractview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
